#!/usr/bin/env python3
"""Generate the card transaction datasets from a source checkout.

Equivalent to the installed ``card-txn-gen`` command. Writes
transactions_{100,250,500}.csv and .json into the current directory.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from card_txn_gen.cli import main

if __name__ == "__main__":
    sys.exit(main())
