from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError
from apps.tenants.models import Tenant
from apps.tenants.services import create_tenant


class Command(BaseCommand):
    help = 'Create a label tenant with its subscription plan ceilings'

    def add_arguments(self, parser):
        parser.add_argument('--name', type=str, required=True)
        parser.add_argument('--slug', type=str, required=True)
        parser.add_argument('--email', type=str, required=True)
        parser.add_argument('--plan', type=str, default='free', choices=['free', 'standard', 'pro'])
        parser.add_argument('--max_artists', type=int, help='Override the plan artist ceiling')
        parser.add_argument('--max_works', type=int, help='Override the plan work ceiling')

    def handle(self, *args, **options):
        slug = options['slug']

        if Tenant.objects.filter(slug=slug).exists():
            self.stdout.write(
                self.style.ERROR(f'Tenant with slug {slug} already exists')
            )
            return

        try:
            tenant = create_tenant(
                name=options['name'],
                slug=slug,
                contact_email=options['email'],
                subscription_plan=options['plan'],
                max_artists=options['max_artists'],
                max_works=options['max_works'],
            )
        except ValidationError as e:
            raise CommandError(f'Invalid tenant: {e}')

        self.stdout.write(
            self.style.SUCCESS(
                f'Successfully created tenant {tenant.slug} (id {tenant.id}) on plan {tenant.subscription_plan}: '
                f'{tenant.max_artists} artists / {tenant.max_works} works'
            )
        )
