import pytest
from pydantic import ValidationError

from postnl.entities import RetrieveUpdatedShipmentsRequest


def test_updated_shipments_window() -> None:
    request = RetrieveUpdatedShipmentsRequest("01-07-2019 00:00:00", "03-07-2019 23:59:59")

    assert request.start_date == "01-07-2019 00:00:00"
    assert request.end_date == "03-07-2019 23:59:59"
    assert request.to_payload() == {
        "StartDate": "01-07-2019 00:00:00",
        "EndDate": "03-07-2019 23:59:59",
    }


@pytest.mark.parametrize("value", ["01-07-2019", "2019-07-01 00:00:00", "01-07-2019 24:00:00", "01-07-2019 8:0:0", "01-07-2019 08:00:0"])
def test_updated_shipments_rejects_bad_timestamps(value: str) -> None:
    with pytest.raises(ValidationError):
        RetrieveUpdatedShipmentsRequest(start_date=value)

    request = RetrieveUpdatedShipmentsRequest(end_date="03-07-2019 09:00:00")
    with pytest.raises(ValidationError):
        request.set_end_date(value)
    assert request.end_date == "03-07-2019 09:00:00"


def test_updated_shipments_clear_and_chain() -> None:
    request = RetrieveUpdatedShipmentsRequest(start_date="01-07-2019 00:00:00")

    assert request.set_start_date(None).set_end_date("02-07-2019 12:30:00") is request
    assert request.start_date is None
    assert request.end_date == "02-07-2019 12:30:00"
