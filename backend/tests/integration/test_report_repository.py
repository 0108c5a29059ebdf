"""Integration tests: report repository with test DB session."""
import pytest

from repositories.report_repository import (
    count_reports_by_location,
    create_report,
    get_report,
    list_recent_reports,
)
from status_core.derive import derive_status
from status_core.status import Status

pytestmark = pytest.mark.integration


@pytest.fixture
def loc_id(make_location):
    return make_location("loc-reports").id


def test_create_report_defaults(db_session, loc_id):
    """create_report stores the status literal and timestamps the report."""
    r = create_report(db_session, location_id=loc_id, status=Status.ISSUES, note="Bon komt niet uit", ip_hash="ab" * 32)
    stored = get_report(db_session, r.id)
    assert stored is not None
    assert stored.status == "ISSUES"
    assert stored.note == "Bon komt niet uit"
    assert stored.ip_hash == "ab" * 32
    assert stored.created_at is not None


def test_create_report_rejects_unknown_status(db_session, loc_id):
    with pytest.raises(ValueError):
        create_report(db_session, location_id=loc_id, status="BROKEN")


def test_list_recent_reports_newest_first_and_limited(db_session, loc_id, hours_ago):
    for h in (5, 1, 30, 2):
        create_report(db_session, location_id=loc_id, status=Status.WORKING, created_at=hours_ago(h))
    recent = list_recent_reports(db_session, loc_id, 3)
    assert len(recent) == 3
    ages = [r.created_at for r in recent]
    assert ages == sorted(ages, reverse=True)
    assert count_reports_by_location(db_session, loc_id) == 4


def test_reports_are_scoped_to_location(db_session, loc_id, make_location, hours_ago):
    other = make_location("loc-other")
    create_report(db_session, location_id=loc_id, status=Status.WORKING, created_at=hours_ago(1))
    create_report(db_session, location_id=other.id, status=Status.OUT_OF_ORDER, created_at=hours_ago(1))
    assert [r.status for r in list_recent_reports(db_session, loc_id, 10)] == ["WORKING"]
    assert count_reports_by_location(db_session, other.id) == 1


def test_derive_from_stored_rows(db_session, loc_id, hours_ago, now):
    """ORM rows (string status, SQLite datetimes) feed the deriver directly."""
    create_report(db_session, location_id=loc_id, status=Status.OUT_OF_ORDER, created_at=hours_ago(100))
    create_report(db_session, location_id=loc_id, status=Status.OUT_OF_ORDER, created_at=hours_ago(120))
    create_report(db_session, location_id=loc_id, status=Status.WORKING, created_at=hours_ago(1))
    assert derive_status(list_recent_reports(db_session, loc_id, 50), now) is Status.WORKING
