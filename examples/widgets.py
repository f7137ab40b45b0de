"""
Example usage of the Mongo DB Facade.

Connects to a local MongoDB server (override with MONGO_FACADE_HOSTS) and
walks a single widget through its create/read/update/delete lifecycle.
"""

import logging

from mongo_dbfacade import ConnectionTuning, MongoConfig, MongoFacadeError, connect


def main() -> None:
    """Run the widget lifecycle against the configured server."""
    logging.basicConfig(level=logging.INFO)

    config = MongoConfig(
        hosts=["localhost:27017"],
        database="testdb",
        connection=ConnectionTuning(
            max_pool_size=10,
            server_selection_timeout_ms=2000,
            write_concern_majority=True,
        ),
    )

    try:
        client = connect(config)
    except MongoFacadeError as e:
        print(f"Could not connect: {e}")
        return

    try:
        client.create_one("widgets", {"_id": 1, "name": "a"})
        print("Inserted:", client.read_one("widgets", {"_id": 1}))

        client.update_one("widgets", {"_id": 1}, {"$set": {"name": "b"}})
        print("Names only:", client.read_with_projection("widgets", {}, {"name": 1, "_id": 0}))

        print("Deleted:", client.delete_one("widgets", {"_id": 1}))
        print("After delete:", client.read_one("widgets", {"_id": 1}))
    finally:
        client.close()


if __name__ == "__main__":
    main()
