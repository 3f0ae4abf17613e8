import logging

from tool_rental import seed_sample_tools
from tool_rental.config import Config
from tool_rental.models.store import Store


def main():
    """
    Put the sample tools (Power Drill, Lawn Mower, Pressure Washer) into the
    store file named by STORE_PATH. Only an empty catalogue is seeded, so
    this is safe to rerun.
    """
    logging.basicConfig(level=Config.LOG_LEVEL)
    if not Config.STORE_PATH:
        print("STORE_PATH is not set; seeding an in-memory store has no lasting effect.")
        return

    store = Store(Config.STORE_PATH)
    added = seed_sample_tools(store)
    store.save()

    print(f"Seed complete: {added} tool(s) added, {len(store.tools)} in catalogue.")


if __name__ == "__main__":
    main()
