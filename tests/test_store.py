import pytest

from gottip.config import DEFAULT_TIP_PERCENT
from gottip.model.sanitizer import Edit


class Recorder:
    def __init__(self, signal):
        self.calls = []
        signal.connect(self.calls.append)


def test_defaults(store):
    assert store.subtotal_text == ""
    assert store.tip_percent == DEFAULT_TIP_PERCENT == 15
    assert store.result() is None


def test_accepted_edit_emits_subtotal_and_result(store):
    subtotals = Recorder(store.subtotal_changed)
    results = Recorder(store.result_changed)

    assert store.apply_edit(Edit.insert(0, "20"))

    assert store.subtotal_text == "20"
    assert subtotals.calls == ["20"]
    assert results.calls[-1].total_display == "23.00"


def test_rejected_edit_leaves_state_and_emits_nothing(store):
    store.set_subtotal_text("1.5")
    subtotals = Recorder(store.subtotal_changed)

    assert not store.apply_edit(Edit.insert(3, "."))

    assert store.subtotal_text == "1.5"
    assert subtotals.calls == []


def test_set_subtotal_text_sanitizes(store):
    store.set_subtotal_text("$12.345abc")
    assert store.subtotal_text == "12.34"


def test_set_tip_percent_emits_once(store):
    percents = Recorder(store.tip_percent_changed)
    store.set_tip_percent(20)
    store.set_tip_percent(20)
    assert percents.calls == [20]


@pytest.mark.parametrize("value", [-1, 31])
def test_set_tip_percent_out_of_range_raises(store, value):
    with pytest.raises(ValueError):
        store.set_tip_percent(value)
    assert store.tip_percent == DEFAULT_TIP_PERCENT


def test_result_follows_percent(store):
    store.set_subtotal_text("100")
    store.set_tip_percent(0)
    assert store.result().total_display == "100.00"
    store.set_tip_percent(30)
    assert store.result().tip_display == "30.00"


def test_reset(store):
    store.set_subtotal_text("55")
    store.set_tip_percent(10)
    store.reset()
    assert store.subtotal_text == ""
    assert store.tip_percent == DEFAULT_TIP_PERCENT
    assert store.result() is None


@pytest.mark.parametrize("value", [7.5, True, False, float("nan")])
def test_set_tip_percent_rejects_non_whole_numbers(store, value):
    with pytest.raises(ValueError):
        store.set_tip_percent(value)
    assert store.tip_percent == DEFAULT_TIP_PERCENT


def test_set_tip_percent_accepts_whole_float(store):
    store.set_tip_percent(20.0)
    assert store.tip_percent == 20
    assert isinstance(store.tip_percent, int)
