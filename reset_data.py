"""
reset_data.py
-------------
Utility script to clear all stored data (tools, rentals) from the store file
named by STORE_PATH.

This script is designed for development and testing purposes.

Usage:
    $ STORE_PATH=data.pkl python reset_data.py

After running this script, you can repopulate the sample catalogue by executing:
    $ STORE_PATH=data.pkl python seeds.py
"""

from tool_rental.config import Config
from tool_rental.models.store import Store


def main():
    """Empty both tables and restart the id counters."""
    if not Config.STORE_PATH:
        print("STORE_PATH is not set; nothing to reset.")
        return

    store = Store(Config.STORE_PATH)
    store.clear()

    print(f"{store.path} has been successfully cleared.")
    print("Tip: Run `python seeds.py` to regenerate the sample tools.")


if __name__ == "__main__":
    main()
