"""Domain exceptions for the Folder Permissions bounded context."""


class MalformedIdentifierError(ValueError):
    """Raised when a stored folder permission identifier cannot be decoded.

    The identifier must look like ``<org_id>:<folder_uid>`` or be a bare
    folder UID (legacy form, resolved against the default org).
    """

    pass


class ResourceGoneError(Exception):
    """Raised when the folder backing a permission set no longer exists.

    This is not a failure to surface to the user. Callers should treat the
    permission set as already absent and drop their stored state.
    """

    def __init__(self, org_id: int, folder_uid: str):
        super().__init__(f"Folder {folder_uid} in org {org_id} no longer exists")
        self.org_id = org_id
        self.folder_uid = folder_uid


class ReplacementRequiredError(Exception):
    """Raised when an update tries to change an immutable attribute.

    The folder UID and org of a permission set are fixed once applied; a
    different target must be created as a new permission set.
    """

    def __init__(self, attribute: str, current: object, requested: object):
        super().__init__(
            f"Cannot change {attribute} from {current!r} to {requested!r} in place"
        )
        self.attribute = attribute
        self.current = current
        self.requested = requested
