from django.dispatch import Signal

# Sent by an IdentityProvider whenever its user changes.
# Arguments: user_id (str or None), previous_user_id (str or None)
identity_changed = Signal()
