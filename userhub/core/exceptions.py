class UserhubError(Exception):
    """Base class for errors raised by userhub clients"""


class RequestFailed(UserhubError):
    """
    The remote endpoint answered with a non-success status.

    Only a fixed message is carried; status code and body are not exposed.
    """
