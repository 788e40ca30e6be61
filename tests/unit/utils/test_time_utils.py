from datetime import UTC, date, datetime

import pytest

from petclinic.utils.time_utils import TimeFormats, time_utils


@pytest.mark.unit
def test_format_date_handles_none() -> None:
    assert time_utils.format_date(None) == ""


@pytest.mark.unit
def test_format_date_formats_plain_date() -> None:
    assert time_utils.format_date(date(2010, 9, 7)) == "2010-09-07"


@pytest.mark.unit
def test_format_date_converts_aware_datetime_to_china_time() -> None:
    value = datetime(2026, 1, 1, 20, 30, tzinfo=UTC)

    assert time_utils.format_date(value, TimeFormats.DATETIME_FORMAT) == "2026-01-02 04:30:00"


@pytest.mark.unit
def test_now_is_timezone_aware() -> None:
    assert time_utils.now().tzinfo is not None
