from core.models import OwnedRecord
from projects.models import ContactFields


class Contact(OwnedRecord, ContactFields):
    """
    Global contact registry of a user, shared across projects.
    Names and emails are matched case-insensitively when merging.
    """

    class Meta(OwnedRecord.Meta):
        pass
