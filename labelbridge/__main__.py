import sys

from .label_printer_hub import main

sys.exit(main())
