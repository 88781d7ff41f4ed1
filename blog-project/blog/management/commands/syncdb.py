import logging

from django.core.management import call_command
from django.core.management.base import BaseCommand
from django.db import DEFAULT_DB_ALIAS

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Creates the database tables for all installed models."

    def add_arguments(self, parser):
        parser.add_argument(
            '--database', default=DEFAULT_DB_ALIAS,
            help='Nominates a database to synchronize. Defaults to the "default" database.',
        )
        parser.add_argument(
            '--noinput', '--no-input', action='store_false', dest='interactive',
            help='Tells Django to NOT prompt the user for input of any kind.',
        )

    def handle(self, *args, **options):
        database = options['database']
        logger.info("Synchronizing tables on database '%s'", database)
        # syncdb was folded into migrate; run_syncdb also covers apps without migrations
        call_command(
            'migrate',
            database=database,
            interactive=options['interactive'],
            run_syncdb=True,
            verbosity=options['verbosity'],
            stdout=self.stdout,
            stderr=self.stderr,
        )
