"""
=====================
python-oauth2-storage
=====================

python-oauth2-storage persists the clients, authorization codes and access
tokens of an `OAuth 2.0 <http://tools.ietf.org/html/rfc6749>`_ authorization
server in MongoDB.

Usage
=====

Example::

    from pymongo import MongoClient
    from oauth2storage import AuthorizeData, Client
    from oauth2storage.error import AuthCodeNotFound
    from oauth2storage.store.mongodb import MongodbStorage

    storage = MongodbStorage(db=MongoClient()["oauth2"])

    client = Client(identifier="abc", secret="xyz",
                    redirect_uri="http://localhost/callback")
    storage.create_client(client)

    storage.save_authorize(AuthorizeData(client=client, code="9999",
                                         expires_in=3600,
                                         redirect_uri=client.redirect_uri))

    # The client of the loaded record is read from the clients collection
    authorize_data = storage.load_authorize("9999")

    storage.remove_authorize("9999")

    try:
        storage.load_authorize("9999")
    except AuthCodeNotFound:
        pass

Connection parameters can also be read from the environment, see
:class:`oauth2storage.config.Settings`::

    storage = MongodbStorage.from_settings()


Installation
============

::

    pip install python-oauth2-storage

"""

from oauth2storage.datatype import AccessData, AuthorizeData, Client

VERSION = "0.1.0"

__all__ = ["AccessData", "AuthorizeData", "Client", "VERSION"]
