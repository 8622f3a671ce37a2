import copy
import os

from bson import ObjectId
from pymongo import MongoClient
from pymongo.results import DeleteResult, UpdateResult

from oauth2storage.store.mongodb import MongodbStorage


def storage_factory():
    """
    Returns a creator for the storage under test. A live MongoDB is used if
    the environment variable ``DB`` is set to ``mongodb``.
    """
    database = os.environ.get("DB")

    if database == "mongodb":
        creator_class = MongoDbStorageCreator
    else:
        creator_class = MemoryStorageCreator

    return creator_class()


class StorageCreator(object):
    def create_storage(self):
        raise NotImplementedError

    def teardown(self):
        pass


class MemoryStorageCreator(StorageCreator):
    def create_storage(self):
        return MongodbStorage(db=MemoryDatabase())


class MongoDbStorageCreator(StorageCreator):
    database_name = "oauth2storage_test"

    def create_storage(self):
        self.client = MongoClient(os.environ.get("MONGODB_URI",
                                                 "mongodb://127.0.0.1:27017"),
                                  tz_aware=True)
        self.client.drop_database(self.database_name)

        return MongodbStorage(db=self.client[self.database_name])

    def teardown(self):
        self.client.drop_database(self.database_name)
        self.client.close()


class MemoryDatabase(object):
    """
    Holds a :class:`MemoryCollection` per collection name.
    """
    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        if name not in self.collections:
            self.collections[name] = MemoryCollection(name)
        return self.collections[name]


class MemoryCursor(object):
    def __init__(self, documents):
        self.documents = documents
        self.alive = True

    def __iter__(self):
        return iter(self.documents)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self):
        self.alive = False


class MemoryCollection(object):
    """
    Implements the part of ``pymongo.collection.Collection`` used by the
    stores. Queries may only test fields for equality.
    """
    def __init__(self, name):
        self.name = name
        self.documents = []
        self.cursors = []

    def find(self, query, limit=0):
        matches = [copy.deepcopy(d) for d in self.documents
                   if self._matches(d, query)]
        if limit:
            matches = matches[:limit]

        cursor = MemoryCursor(matches)
        self.cursors.append(cursor)
        return cursor

    def insert_one(self, document):
        document = copy.deepcopy(document)
        document.setdefault("_id", ObjectId())
        self.documents.append(document)

    def replace_one(self, query, replacement):
        for index, document in enumerate(self.documents):
            if self._matches(document, query):
                replacement = copy.deepcopy(replacement)
                replacement["_id"] = document["_id"]
                self.documents[index] = replacement
                return UpdateResult({"n": 1, "nModified": 1}, True)

        return UpdateResult({"n": 0, "nModified": 0}, True)

    def delete_one(self, query):
        for index, document in enumerate(self.documents):
            if self._matches(document, query):
                del self.documents[index]
                return DeleteResult({"n": 1}, True)

        return DeleteResult({"n": 0}, True)

    def _matches(self, document, query):
        return all(document.get(key) == value for key, value in query.items())
