"""
Logging of the commands the MongoDB driver sends.

An instance of :class:`CommandLogger` is passed to a ``MongoClient`` via
``event_listeners`` so the verbosity applies to that client only::

    from pymongo import MongoClient

    client = MongoClient(event_listeners=[CommandLogger("DEBUG")])

"""

import logging

from pymongo import monitoring

logger = logging.getLogger(__name__)


def to_level(level):
    """
    Converts a level name like ``"debug"`` or a numeric level to the numeric
    value used by :mod:`logging`.
    """
    if isinstance(level, int):
        return level

    value = logging.getLevelName(str(level).upper())

    if not isinstance(value, int):
        raise ValueError("Unknown log level '%s'" % level)

    return value


class CommandLogger(monitoring.CommandListener):
    """
    Logs every command at ``level``. Failed commands are always logged as
    warnings.
    """
    def __init__(self, level=logging.DEBUG, log=logger):
        self.level = to_level(level)
        self.log = log

    def started(self, event):
        self.log.log(self.level, "Command %s with request id %s started on "
                     "server %s", event.command_name, event.request_id,
                     event.connection_id)

    def succeeded(self, event):
        self.log.log(self.level, "Command %s with request id %s succeeded "
                     "in %s microseconds", event.command_name,
                     event.request_id, event.duration_micros)

    def failed(self, event):
        self.log.warning("Command %s with request id %s failed in %s "
                         "microseconds: %s", event.command_name,
                         event.request_id, event.duration_micros,
                         event.failure)
