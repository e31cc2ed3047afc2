"""Allow `python -m webdoc_qa`."""

import sys

from webdoc_qa.cli import main

sys.exit(main())
