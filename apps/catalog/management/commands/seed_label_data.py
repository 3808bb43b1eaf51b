from datetime import date
from decimal import Decimal
import random

from django.core.management.base import BaseCommand

from apps.catalog.models import PLATFORMS, Artist, Work
from apps.catalog.services import create_artist, create_work
from apps.common.exceptions import DuplicateReport
from apps.royalties.ingestion import ingest_report
from apps.royalties.models import RoyaltyReport, WorkEarnings
from apps.royalties.splits import add_split
from apps.tenants.models import Tenant
from apps.tenants.services import create_tenant

GENRES = ['pop', 'rock', 'hip-hop', 'electronic', 'jazz', 'latin']


class Command(BaseCommand):
    help = 'Seed a demo label with catalog, splits and monthly platform reports'

    def add_arguments(self, parser):
        parser.add_argument('--slug', type=str, default='demo-label', help='Tenant slug to seed')
        parser.add_argument('--artists', type=int, default=10, help='Number of artists')
        parser.add_argument('--works_per_artist', type=int, default=5, help='Works per artist')
        parser.add_argument('--months', type=int, default=12, help='Months of reports ending last month')
        parser.add_argument('--seed', type=int, default=42, help='Random seed for reproducible data')

    def handle(self, *args, **options):
        rng = random.Random(options['seed'])

        self.stdout.write(
            self.style.SUCCESS(f"Seeding label '{options['slug']}'")
        )

        tenant = self.ensure_tenant(options['slug'])
        works = self.ensure_catalog(tenant, options['artists'], options['works_per_artist'], rng)
        reports = self.ingest_reports(tenant, works, options['months'], rng)

        self.show_stats(tenant, reports)

    def ensure_tenant(self, slug):
        tenant = Tenant.objects.filter(slug=slug).first()
        if tenant is None:
            tenant = create_tenant(
                name='Demo Label',
                slug=slug,
                contact_email=f'royalties@{slug}.example.com',
                subscription_plan='pro',
            )
            self.stdout.write(f'Created tenant {tenant.slug} (id {tenant.id})')
        return tenant

    def ensure_catalog(self, tenant, artist_count, works_per_artist, rng):
        existing = Artist.objects.filter(tenant=tenant).count()
        for i in range(existing, artist_count):
            artist = create_artist(tenant.id, f'Demo Artist {i + 1}', genres=[rng.choice(GENRES)])

            for j in range(works_per_artist):
                work = create_work(
                    tenant.id,
                    artist.id,
                    title=f'Track {j + 1} by {artist.stage_name}',
                    genre=artist.genres[0],
                    duration_seconds=rng.randint(120, 360),
                    audio_url=f'https://cdn.example.com/audio/{tenant.slug}/{artist.id}-{j}.wav',
                    artwork_url=f'https://cdn.example.com/art/{tenant.slug}/{artist.id}-{j}.jpg',
                )
                add_split(work.id, 'artist', artist.id, Decimal('60.00'), 'Performer')
                add_split(work.id, 'producer', rng.randint(1000, 9999), Decimal('20.00'), 'Producer')
                add_split(work.id, 'label', tenant.id, Decimal('20.00'), 'Label share')

        works = list(Work.objects.filter(tenant=tenant))
        self.stdout.write(f'Ensured {artist_count} artists and {len(works)} works')
        return works

    def ingest_reports(self, tenant, works, months, rng):
        created = 0
        for period_start, period_end in self.month_periods(months):
            for platform in PLATFORMS:
                lines = []
                for work in works:
                    streams = rng.randint(0, 50000)
                    # Roughly 0.3 to 0.5 cents per stream
                    revenue = (Decimal(streams) * Decimal(rng.randint(30, 50)) / Decimal(10000)).quantize(Decimal('0.01'))
                    lines.append({'work_id': work.id, 'streams': streams, 'revenue': revenue})

                try:
                    ingest_report(tenant.id, platform, 'monthly', period_start, period_end, lines)
                except DuplicateReport:
                    self.stdout.write(f'Skipping {platform} {period_start:%Y-%m}: already ingested')
                    continue
                created += 1

        self.stdout.write(f'Ingested {created} reports')
        return created

    @staticmethod
    def month_periods(months):
        """(first day, last day) of each of the ``months`` months before the current one."""
        today = date.today()
        year, month = today.year, today.month
        periods = []
        for _ in range(months):
            month -= 1
            if month == 0:
                year, month = year - 1, 12
            start = date(year, month, 1)
            next_start = date(year + (month == 12), month % 12 + 1, 1)
            periods.append((start, date.fromordinal(next_start.toordinal() - 1)))
        return list(reversed(periods))

    def show_stats(self, tenant, reports_created):
        self.stdout.write(
            self.style.SUCCESS('\nFINAL STATISTICS:')
        )
        self.stdout.write(f'   Artists: {Artist.objects.filter(tenant=tenant).count()}')
        self.stdout.write(f'   Works: {Work.objects.filter(tenant=tenant).count()}')
        self.stdout.write(f'   Reports: {RoyaltyReport.objects.filter(tenant=tenant).count()}')
        self.stdout.write(f'   Earnings rows: {WorkEarnings.objects.filter(work__tenant=tenant).count():,}')
        self.stdout.write(f'   Reports created this run: {reports_created}')
