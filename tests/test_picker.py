# tests/test_picker.py

from datetime import date, datetime

import pytest

import ethiocal
from ethiocal import EthiopianDate, PickerOptions
from ethiocal.picker import (
    close_label,
    enabled_days,
    is_date_disabled,
    month_title,
    selection,
    today_label,
)


def test_defaults():
    opts = PickerOptions()
    assert opts.locale == "am"
    assert opts.highlight_holidays and opts.show_today_button
    assert opts.date_format == "DD/MM/YYYY"
    assert not is_date_disabled(EthiopianDate(2016, 1, 1), opts)


def test_min_max_and_disabled():
    opts = PickerOptions(
        locale="en",
        min_date=date(2023, 9, 12),
        max_date=datetime(2023, 10, 11, 8, 30),
        disabled_dates=[date(2023, 9, 28)],
    )
    assert opts.max_date == date(2023, 10, 11)
    assert is_date_disabled(EthiopianDate(2015, 13, 6), opts)
    assert not is_date_disabled(EthiopianDate(2016, 1, 1), opts)
    assert is_date_disabled(EthiopianDate(2016, 1, 17), opts)   # 2023-09-28
    assert not is_date_disabled(EthiopianDate(2016, 1, 30), opts)  # 2023-10-11
    assert is_date_disabled(EthiopianDate(2016, 2, 1), opts)
    days = list(enabled_days(2016, 1, opts))
    assert len(days) == 29
    assert EthiopianDate(2016, 1, 17) not in days


def test_ethiopian_bounds_are_converted():
    opts = PickerOptions(min_date=EthiopianDate(2016, 1, 1))
    assert opts.min_date == date(2023, 9, 12)


def test_from_mapping():
    opts = PickerOptions.from_mapping({"locale": "en", "highlight_holidays": False})
    assert opts.locale == "en"
    assert opts.highlight_holidays is False
    with pytest.raises(ethiocal.InvalidInput):
        PickerOptions.from_mapping({"darkMode": True})


@pytest.mark.parametrize("kwargs, err", [
    ({"locale": "fr"}, ethiocal.InvalidIndex),
    ({"min_date": "2023-09-12"}, ethiocal.InvalidInput),
    ({"min_date": date(2024, 1, 1), "max_date": date(2023, 1, 1)}, ethiocal.InvalidInput),
    ({"date_format": "YYYY"}, ethiocal.InvalidInput),
])
def test_invalid_options(kwargs, err):
    with pytest.raises(err):
        PickerOptions(**kwargs)


def test_toggle_locale():
    opts = PickerOptions()
    assert opts.toggled_locale().locale == "en"
    assert opts.toggled_locale().toggled_locale() == opts


def test_selection_payload():
    e = EthiopianDate(2016, 1, 1)
    payload = selection(e, PickerOptions(locale="en"))
    assert payload == {
        "ethiopian": e,
        "gregorian": date(2023, 9, 12),
        "formatted": "Meskerem 1, 2016",
    }


def test_labels_and_title():
    assert month_title(2016, 1, "en") == "Meskerem 2016"
    assert month_title(2016, 13, "am") == "ጳጉሜ 2016"
    assert today_label("en") == "Today"
    assert today_label("am") == "ዛሬ"
    assert close_label("en") == "Close"
