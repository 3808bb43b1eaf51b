from datetime import date
from decimal import Decimal

from django.test import TestCase

from apps.common.exceptions import (
    DuplicateReport,
    InvalidEarnings,
    InvalidPeriod,
    InvalidPlatform,
    TenantNotFound,
    WorkNotOwnedByTenant,
)
from apps.common.tests.fixtures import make_artist, make_tenant, make_work
from apps.royalties.ingestion import ingest_report
from apps.royalties.models import RoyaltyReport, WorkEarnings


class IngestReportTest(TestCase):

    def setUp(self):
        self.tenant = make_tenant()
        self.artist = make_artist(self.tenant)
        self.first = make_work(self.tenant, self.artist, 'First Light')
        self.second = make_work(self.tenant, self.artist, 'Second Wind')

    def ingest(self, lines, platform='spotify', start=date(2024, 1, 1), end=date(2024, 1, 31)):
        return ingest_report(self.tenant.id, platform, 'monthly', start, end, lines)

    def test_totals_equal_sum_of_lines(self):
        report = self.ingest([
            {'work_id': self.first.id, 'streams': 700, 'revenue': Decimal('70.00')},
            {'work_id': self.second.id, 'streams': 300, 'revenue': Decimal('30.00')},
        ])

        report.refresh_from_db()
        self.assertEqual(report.total_streams, 1000)
        self.assertEqual(report.total_revenue, Decimal('100.00'))
        self.assertIsNotNone(report.processed_at)
        earnings = WorkEarnings.objects.filter(royalty_report=report)
        self.assertEqual(earnings.count(), 2)
        self.assertEqual({e.platform for e in earnings}, {'spotify'})

    def test_decimal_sums_are_exact(self):
        report = self.ingest([
            {'work_id': self.first.id, 'streams': 1, 'revenue': '0.10'},
            {'work_id': self.second.id, 'streams': 2, 'revenue': '0.20'},
        ])
        self.assertEqual(report.total_revenue, Decimal('0.30'))

    def test_foreign_work_rejects_whole_report(self):
        other = make_tenant('other-label')
        foreign = make_work(other, make_artist(other, 'Elsewhere'), 'Not Ours')

        with self.assertRaises(WorkNotOwnedByTenant) as ctx:
            self.ingest([
                {'work_id': self.first.id, 'streams': 10, 'revenue': '1.00'},
                {'work_id': foreign.id, 'streams': 10, 'revenue': '1.00'},
            ])

        self.assertEqual(ctx.exception.detail['work_id'], foreign.id)
        self.assertFalse(RoyaltyReport.objects.exists())
        self.assertFalse(WorkEarnings.objects.exists())

    def test_unknown_work_rejects_whole_report(self):
        with self.assertRaises(WorkNotOwnedByTenant):
            self.ingest([{'work_id': 31337, 'streams': 1, 'revenue': '0.01'}])
        self.assertFalse(RoyaltyReport.objects.exists())

    def test_empty_report_has_zero_totals(self):
        report = self.ingest([])
        self.assertEqual(report.total_streams, 0)
        self.assertEqual(report.total_revenue, Decimal('0.00'))
        self.assertFalse(WorkEarnings.objects.exists())

    def test_same_period_twice_is_a_duplicate(self):
        self.ingest([{'work_id': self.first.id, 'streams': 5, 'revenue': '0.50'}])

        with self.assertRaises(DuplicateReport):
            self.ingest([{'work_id': self.first.id, 'streams': 5, 'revenue': '0.50'}])
        self.assertEqual(RoyaltyReport.objects.count(), 1)
        self.assertEqual(WorkEarnings.objects.count(), 1)

    def test_same_period_on_another_platform_is_fine(self):
        self.ingest([], platform='spotify')
        self.ingest([], platform='deezer')
        self.assertEqual(RoyaltyReport.objects.count(), 2)

    def test_iso_dates_accepted(self):
        report = self.ingest([], start='2024-02-01', end='2024-02-29')
        self.assertEqual(report.period_start, date(2024, 2, 1))

    def test_validation_happens_before_any_write(self):
        cases = [
            (InvalidPlatform, {'platform': 'napster'}),
            (InvalidPeriod, {'start': date(2024, 2, 1), 'end': date(2024, 1, 1)}),
            (InvalidPeriod, {'start': 'not-a-date'}),
        ]
        for error, overrides in cases:
            with self.subTest(error=error.__name__, **{k: str(v) for k, v in overrides.items()}):
                with self.assertRaises(error):
                    self.ingest([{'work_id': self.first.id, 'streams': 1, 'revenue': '1.00'}], **overrides)
        self.assertFalse(RoyaltyReport.objects.exists())

    def test_negative_or_malformed_earnings(self):
        for line in (
            {'work_id': self.first.id, 'streams': -1, 'revenue': '1.00'},
            {'work_id': self.first.id, 'streams': 1, 'revenue': '-0.01'},
            {'work_id': self.first.id, 'streams': 1, 'revenue': '0.001'},
            {'work_id': self.first.id, 'streams': 1, 'revenue': 'lots'},
        ):
            with self.subTest(line=line):
                with self.assertRaises(InvalidEarnings):
                    self.ingest([line])
        self.assertFalse(WorkEarnings.objects.exists())

    def test_unknown_period_type(self):
        with self.assertRaises(InvalidPeriod):
            ingest_report(self.tenant.id, 'spotify', 'weekly', date(2024, 1, 1), date(2024, 1, 7), [])

    def test_unknown_tenant(self):
        with self.assertRaises(TenantNotFound):
            ingest_report(55555, 'spotify', 'monthly', date(2024, 1, 1), date(2024, 1, 31), [])
