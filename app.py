#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
QR Encoder - Flask Web Application

Form preview with a zone-colored rendering and mask penalty scores, plus
black and white PNG/SVG exports.

Run:
    python app.py
Open:
    http://127.0.0.1:5000/
"""

import logging
from flask import Flask, render_template_string, request, send_file
from io import BytesIO
from typing import Tuple
from urllib.parse import urlencode

from qr_encoder import evaluate_all_masks, make_qr
from qr_encoder.payloads import text_payload, url_payload, vcard_payload, wifi_payload
from qr_encoder.renderer import PALETTE, render_image, render_svg, render_zones_png, render_zones_svg
from qr_encoder.tables import MAX_VERSION

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

TEMPLATE = """
<!doctype html>
<html>
<head>
  <meta charset="utf-8">
  <title>QR Encoder</title>
  <style>
    body{font-family:Inter, Arial, sans-serif; padding:18px; background:#fff; color:#222}
    .row{display:flex; flex-wrap:wrap; gap:16px; align-items:flex-end}
    .field{display:flex; flex-direction:column; font-size:14px}
    input[type="text"], select, input[type="number"]{padding:6px 8px; font-family:monospace; border:1px solid #ccc; border-radius:6px}
    label{font-weight:600; margin-bottom:4px}
    button{padding:10px 16px; border-radius:8px; border:1px solid #333; background:#111; color:#fff; cursor:pointer}
    .card{margin-top:18px; border:1px solid #ddd; border-radius:10px; padding:14px}
    img{display:block; margin:8px 0; border:1px solid #ccc}
    .metrics{font-size:13px; color:#333; line-height:1.4}
    .legend div{margin:6px 0}
    .sw{display:inline-block; width:18px; height:12px; border:1px solid #aaa; margin-right:8px}
    .error{color:#b00; font-weight:700}
    .hint{font-size:12px; color:#666}
  </style>
</head>
<body>
  <h1>QR Encoder</h1>

  <form method="post">
    <div class="row">
      <div class="field">
        <label>Payload</label>
        <select name="kind">
          {% for v in ['text','url','wifi','contact'] %}
            <option value="{{v}}" {% if kind==v %}selected{% endif %}>{{v}}</option>
          {% endfor %}
        </select>
      </div>
      <div class="field" style="flex:1 1 60%">
        <label>Text / URL</label>
        <input type="text" name="text" value="{{form.text|e}}">
      </div>
    </div>

    <div class="row">
      <div class="field"><label>SSID</label><input type="text" name="ssid" value="{{form.ssid|e}}"></div>
      <div class="field"><label>Password</label><input type="text" name="password" value="{{form.password|e}}"></div>
      <div class="field">
        <label>Security</label>
        <select name="security">
          {% for v in ['WPA','WEP','nopass'] %}
            <option value="{{v}}" {% if form.security==v %}selected{% endif %}>{{v}}</option>
          {% endfor %}
        </select>
      </div>
      <div class="field"><label>Hidden</label><input type="checkbox" name="hidden" value="true" {% if form.hidden=='true' %}checked{% endif %}></div>
      <div class="field"><label>Name</label><input type="text" name="name" value="{{form.name|e}}"></div>
      <div class="field"><label>Phone</label><input type="text" name="phone" value="{{form.phone|e}}"></div>
      <div class="field"><label>Email</label><input type="text" name="email" value="{{form.email|e}}"></div>
    </div>

    <div class="row">
      <div class="field">
        <label>ECC</label>
        <select name="ecc">
          {% for v in ['L','M','Q','H'] %}
            <option value="{{v}}" {% if ecc==v %}selected{% endif %}>{{v}}</option>
          {% endfor %}
        </select>
      </div>
      <div class="field">
        <label>Version</label>
        <select name="version">
          <option value="auto" {% if version=='auto' %}selected{% endif %}>auto (smallest)</option>
          {% for v in range(1, max_version + 1) %}
            <option value="{{v}}" {% if version==v|string %}selected{% endif %}>v{{v}}</option>
          {% endfor %}
        </select>
      </div>
      <div class="field">
        <label>Mask</label>
        <select name="mask">
          <option value="auto" {% if mask=='auto' %}selected{% endif %}>auto</option>
          {% for m in range(8) %}
            <option value="{{m}}" {% if mask==m|string %}selected{% endif %}>{{m}}</option>
          {% endfor %}
        </select>
      </div>
      <div class="field">
        <label>Quiet zone (modules)</label>
        <input type="number" name="border" min="0" max="20" step="1" value="{{border}}">
      </div>
      <button type="submit">Generate</button>
    </div>
  </form>

  {% if error %}
    <p class="error">{{error}}</p>
  {% endif %}

  {% if qr %}
    <div class="card">
      <strong>v{{qr.version}}-{{qr.ecc}}</strong> ({{qr.size}}x{{qr.size}} modules, mask={{qr.mask}})
      <img src="data:image/png;base64,{{qr.img_b64}}" width="300" alt="QR v{{qr.version}}">
      <div class="metrics">
        Dark modules: {{qr.dark_modules}} / {{qr.modules}}<br>
        Functional modules: {{qr.functional_modules}}<br>
        Data modules: {{qr.data_modules}}<br>
        Best mask: <strong>{{qr.best_mask}}</strong> (score={{qr.best_score}})
        <div class="hint">Scores per mask: {{qr.mask_scores_text}}</div>
        <a href="{{qr.export_query}}">PNG</a> |
        <a href="{{qr.export_query|replace('/export/png', '/export/svg')}}">SVG</a> |
        <a href="{{qr.export_query|replace('/export/png', '/export/svg-colored')}}">Zones SVG</a>
      </div>
    </div>

    <div class="legend">
      <h3>Legend</h3>
      {% for name, rgb in palette.items() if name != 'background' %}
        <div><span class="sw" style="background:rgb{{rgb}}"></span> {{name}}</div>
      {% endfor %}
    </div>
  {% endif %}
</body>
</html>
"""


def _clamp_int(value, default: int, low: int, high: int) -> int:
    try:
        number = int(value if value not in (None, "") else default)
    except (ValueError, TypeError):
        return default
    if number < low or number > high:
        return default
    return number


def _read_params(req) -> Tuple[str, str, str, str, int, int]:
    """Extract and validate QR generation parameters from Flask request."""
    text = (req.values.get('text') or "").strip()
    ecc = (req.values.get('ecc') or "M").strip().upper()
    version = (req.values.get('version') or "auto").strip()
    mask = (req.values.get('mask') or "0").strip()
    border = _clamp_int(req.values.get('border'), 4, 0, 20)
    scale = _clamp_int(req.values.get('scale'), 10, 1, 40)
    return text, ecc, version, mask, border, scale


def _build_payload(kind: str, form) -> str:
    """Turn the form fields of the selected payload kind into QR text."""
    if kind == 'url':
        return url_payload(form.get('text', ''))
    if kind == 'wifi':
        return wifi_payload(form.get('ssid', ''), form.get('password', ''),
                            form.get('security', 'WPA'), form.get('hidden') == 'true')
    if kind == 'contact':
        return vcard_payload(form.get('name', ''), form.get('phone', ''), form.get('email', ''))
    return text_payload(form.get('text', ''))


app = Flask(__name__)


@app.route('/', methods=['GET', 'POST'])
def index():
    ecc = "M"
    version = "auto"
    mask = "0"
    border = 4
    kind = "text"
    fields = ('text', 'ssid', 'password', 'security', 'hidden', 'name', 'phone', 'email')
    form = {key: request.form.get(key, '') for key in fields}

    qr_view = None
    error = None

    if request.method == 'POST':
        kind = request.form.get('kind') or "text"
        _, ecc, version, mask, border, _ = _read_params(request)

        try:
            payload = _build_payload(kind, request.form)
            logger.info(f"Generating QR code with parameters: ecc={ecc}, version={version}, mask={mask}")
            qr_symbol = make_qr(payload, ecc=ecc, version=version, mask=mask)
            logger.info(f"Successfully generated QR code version {qr_symbol.version}")
        except ValueError as ex:
            error = f"Could not generate the QR code with the chosen parameters: {ex}"
            logger.error(f"QR generation failed: {ex}")
            qr_symbol = None

        if qr_symbol:
            b64, metrics = render_zones_png(qr_symbol, border=border, scale=6)

            logger.info("Evaluating all mask patterns")
            best_mask, best_score, scores = evaluate_all_masks(
                qr_symbol.payload, ecc=qr_symbol.level, version=qr_symbol.version
            )
            scores_text = ", ".join(f"{k}:{v}" for k, v in sorted(scores.items()))

            qr_view = {
                'version': qr_symbol.version,
                'ecc': str(qr_symbol.level),
                'mask': qr_symbol.mask,
                'size': metrics['size'],
                'img_b64': b64,
                'modules': metrics['modules'],
                'dark_modules': metrics['dark_modules'],
                'functional_modules': metrics['functional_modules'],
                'data_modules': metrics['data_modules'],
                'best_mask': best_mask,
                'best_score': best_score,
                'mask_scores_text': scores_text,
                'export_query': _export_url('/export/png', qr_symbol.text, ecc, version, qr_symbol.mask, border),
            }

    return render_template_string(
        TEMPLATE,
        kind=kind, form=form, ecc=ecc, version=version, mask=mask, border=border,
        max_version=MAX_VERSION, palette=PALETTE, qr=qr_view, error=error
    )


def _export_url(path: str, text: str, ecc: str, version: str, mask: int, border: int) -> str:
    query = urlencode({'text': text, 'ecc': ecc, 'version': version, 'mask': mask, 'border': border})
    return f"{path}?{query}"


def _make_from_request():
    text, ecc, version, mask, border, scale = _read_params(request)
    if not text:
        return None, ("Missing text", 400), border, scale
    try:
        qr = make_qr(text, ecc=ecc, version=version, mask=mask)
    except ValueError as ex:
        logger.warning(f"Export rejected: {ex}")
        return None, (str(ex), 400), border, scale
    return qr, None, border, scale


@app.route('/export/png', methods=['GET'])
def export_png_bw():
    qr, failure, border, scale = _make_from_request()
    if failure:
        return failure
    buf = BytesIO()
    render_image(qr.matrix, module_size=scale, margin=border,
                 dark_color='black', light_color='white').save(buf, format='PNG')
    buf.seek(0)
    return send_file(buf, as_attachment=True, download_name='qr_bw.png', mimetype='image/png')


@app.route('/export/svg', methods=['GET'])
def export_svg_bw():
    qr, failure, border, scale = _make_from_request()
    if failure:
        return failure
    svg_bytes = render_svg(qr.matrix, module_size=scale, margin=border,
                           dark_color='#000000', light_color='#ffffff')
    return send_file(BytesIO(svg_bytes), as_attachment=True,
                     download_name='qr_bw.svg', mimetype='image/svg+xml')


@app.route('/export/svg-colored', methods=['GET'])
def export_svg_colored():
    qr, failure, border, scale = _make_from_request()
    if failure:
        return failure
    svg_bytes = render_zones_svg(qr, border=border, scale=scale)
    return send_file(BytesIO(svg_bytes), as_attachment=True,
                     download_name='qr_colored_zones.svg', mimetype='image/svg+xml')


if __name__ == "__main__":
    app.run(debug=True)
