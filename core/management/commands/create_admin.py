"""
Django management command to create an admin console account.
"""

from getpass import getpass

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

User = get_user_model()

DEFAULT_ADMIN_USERNAME = "admin"


class Command(BaseCommand):
    help = "Create a staff superuser for the admin console"

    def add_arguments(self, parser):
        parser.add_argument(
            "--username",
            default=None,
            help=f"Username for the admin (default: {DEFAULT_ADMIN_USERNAME})",
        )
        parser.add_argument(
            "--email",
            default="",
            help="Email address for the admin (optional)",
        )
        parser.add_argument(
            "--password",
            default=None,
            help="Password for the admin; prompted for when omitted",
        )
        parser.add_argument(
            "--noinput",
            "--no-input",
            action="store_false",
            dest="interactive",
            help="Never prompt; fail if a required value is missing",
        )

    def handle(self, *args, **options):
        """Create the admin account."""
        interactive = options["interactive"]
        username = options["username"]
        password = options["password"]

        if not username:
            if interactive:
                prompt = f"Admin username (default: {DEFAULT_ADMIN_USERNAME}): "
                username = input(prompt).strip() or DEFAULT_ADMIN_USERNAME
            else:
                username = DEFAULT_ADMIN_USERNAME

        if User.objects.filter(username=username).exists():
            raise CommandError(f"User '{username}' already exists")

        if not password:
            if not interactive:
                raise CommandError("--password is required with --noinput")
            password = getpass("Admin password: ").strip()
            while not password:
                password = getpass("Password is required. Admin password: ").strip()

        User.objects.create_superuser(
            username=username,
            email=options["email"],
            password=password,
        )

        self.stdout.write(
            self.style.SUCCESS(f"✅ Admin '{username}' created successfully")
        )
