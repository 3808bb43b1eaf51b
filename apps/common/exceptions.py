"""
Typed failures raised by the royalty and distribution engine.

Every error carries a ``kind`` (one of the four families below), a stable
``code`` and a ``detail`` dict with the offending values so callers can
render a precise message. Only ``TransactionConflict`` is safe to retry
unchanged.
"""

NOT_FOUND = 'not_found'
INVARIANT_VIOLATION = 'invariant_violation'
PRECONDITION_FAILED = 'precondition_failed'
TRANSACTION_CONFLICT = 'transaction_conflict'


class EngineError(Exception):
    kind = None
    code = 'engine_error'
    template = 'engine error'
    retryable = False

    def __init__(self, **detail):
        self.detail = detail
        super().__init__(self.template.format(**detail))

    @property
    def message(self):
        return str(self)

    def as_dict(self):
        return {
            'kind': self.kind,
            'code': self.code,
            'message': self.message,
            'detail': self.detail,
            'retryable': self.retryable,
        }


# Not found

class NotFound(EngineError):
    kind = NOT_FOUND


class TenantNotFound(NotFound):
    code = 'tenant_not_found'
    template = 'tenant {tenant_id} not found'


class ArtistNotFound(NotFound):
    code = 'artist_not_found'
    template = 'artist {artist_id} not found'


class WorkNotFound(NotFound):
    code = 'work_not_found'
    template = 'work {work_id} not found'


class ReportNotFound(NotFound):
    code = 'report_not_found'
    template = 'royalty report {report_id} not found'


# Invariant violations

class InvariantViolation(EngineError):
    kind = INVARIANT_VIOLATION


class TenantInactive(InvariantViolation):
    code = 'tenant_inactive'
    template = 'tenant {tenant_id} is not active'


class QuotaLimitReached(InvariantViolation):
    code = 'limit_reached'
    template = '{resource} limit reached: {current} of {limit} used'


class SplitOverflow(InvariantViolation):
    code = 'split_overflow'
    template = 'split overflow: current {current}%, attempted {attempted}%'


class DuplicateReport(InvariantViolation):
    code = 'duplicate_report'
    template = '{platform} report for {period_start}..{period_end} already ingested for tenant {tenant_id}'


class InvalidTransition(InvariantViolation):
    code = 'invalid_transition'
    template = 'work {work_id} cannot move from {current} to {target}'


# Precondition failures

class PreconditionFailed(EngineError):
    kind = PRECONDITION_FAILED


class MissingAudio(PreconditionFailed):
    code = 'missing_audio'
    template = 'work {work_id} has no audio file'


class MissingArtwork(PreconditionFailed):
    code = 'missing_artwork'
    template = 'work {work_id} has no artwork'


class ArtistInactive(PreconditionFailed):
    code = 'artist_inactive'
    template = 'artist {artist_id} is not active'


class EmptyPlatformList(PreconditionFailed):
    code = 'empty_platform_list'
    template = 'at least one platform must be specified'


class InvalidPlatform(PreconditionFailed):
    code = 'invalid_platform'
    template = 'invalid platforms: {platforms}'

    def __init__(self, platforms):
        super().__init__(platforms=list(platforms))

    def __str__(self):
        return 'invalid platforms: ' + ', '.join(self.detail['platforms'])


class InvalidRecipientType(PreconditionFailed):
    code = 'invalid_recipient_type'
    template = 'invalid recipient type: {recipient_type}'


class InvalidPercentage(PreconditionFailed):
    code = 'invalid_percentage'
    template = 'percentage must be greater than 0 and at most 100, got {percentage}'


class InvalidPeriod(PreconditionFailed):
    code = 'invalid_period'
    template = 'invalid reporting period: {reason}'


class InvalidEarnings(PreconditionFailed):
    code = 'invalid_earnings'
    template = 'invalid earnings for work {work_id}: {reason}'


class WorkNotOwnedByTenant(PreconditionFailed):
    code = 'work_not_owned_by_tenant'
    template = 'work {work_id} not found or does not belong to tenant {tenant_id}'


class ArtistTenantMismatch(PreconditionFailed):
    code = 'artist_tenant_mismatch'
    template = 'artist {artist_id} does not belong to tenant {tenant_id}'


class InvalidDuration(PreconditionFailed):
    code = 'invalid_duration'
    template = 'duration_seconds must be a positive integer, got {duration_seconds}'


class InvalidResource(PreconditionFailed):
    code = 'invalid_resource'
    template = 'unknown quota resource: {resource}'


# Concurrency

class TransactionConflict(EngineError):
    kind = TRANSACTION_CONFLICT
    code = 'transaction_conflict'
    template = '{operation} conflicted with a concurrent writer, retry the operation'
    retryable = True
