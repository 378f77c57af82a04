"""Run the interactive ledger console: python -m bank_ledger"""

from .console import main

if __name__ == "__main__":
    main()
