from django.core.management.base import BaseCommand, CommandError

from core.backends import get_backends
from core.domains import registry
from core.migration import MigrationCoordinator
from core.storage import clear_user_data


class Command(BaseCommand):
    help = "Copies a user's on-device data into the remote backend (domains already migrated are skipped)"

    def add_arguments(self, parser):
        parser.add_argument("user_id", help="Sync identity of the user (Supabase id or primary key)")
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Remove the user's on-device data instead of migrating it",
        )

    def handle(self, *args, **options):
        user_id = options["user_id"]
        remote, local = get_backends()

        if options["clear"]:
            clear_user_data(local.store, user_id)
            self.stdout.write(self.style.SUCCESS(f"Cleared on-device data of {user_id}"))
            return

        if remote is None:
            raise CommandError("No remote backend configured (SYNC_REMOTE_BACKEND is empty)")

        results = MigrationCoordinator(remote, local).migrate_all(user_id, registry)
        for name, copied in results.items():
            self.stdout.write(f"{name}: {copied} record(s) copied")
        self.stdout.write(self.style.SUCCESS(f"Migrated {sum(results.values())} record(s) for {user_id}"))
