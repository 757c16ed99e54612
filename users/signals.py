# users/signals.py
from django.db.models.signals import post_save
from django.dispatch import receiver

from core.identity import user_identity
from core.storage import clear_user_data, get_local_store
from .models import User


@receiver(post_save, sender=User)
def clear_device_data_for_new_user(sender, instance, created, **kwargs):
    # A new account never inherits on-device data left under a reused id
    if created:
        clear_user_data(get_local_store(), user_identity(instance))
