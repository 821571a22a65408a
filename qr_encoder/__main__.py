import sys

from qr_encoder.cli import main

sys.exit(main())
