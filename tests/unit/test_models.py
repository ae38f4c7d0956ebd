import pytest
from pydantic import ValidationError

from core.domain.models import AddressLiteral, AddressVerdict, ValidatedAddressLiteral
from core.interfaces.printer import AddressPrinter


def test_address_literal_is_echoed_verbatim():
    address = AddressLiteral(literal="300.1.1.1")
    assert address.format() == "300.1.1.1"
    assert str(address) == "300.1.1.1"


def test_validated_format():
    assert ValidatedAddressLiteral(literal="192.168.0.1").format() == "192.168.0.1 Correct"
    assert ValidatedAddressLiteral(literal="300.1.1.1").format() == "300.1.1.1 Not Correct"


def test_is_valid_cannot_be_forced_by_caller():
    with pytest.raises(ValidationError):
        ValidatedAddressLiteral(literal="1.2.3", is_valid=True)


def test_verdict_follows_parsed_strict_flag():
    from_text = ValidatedAddressLiteral(literal="01.1.1.1", strict_zero_padding="false")
    from_bool = ValidatedAddressLiteral(literal="01.1.1.1", strict_zero_padding=False)
    assert from_text.strict_zero_padding is False
    assert from_text.is_valid is True
    assert from_text == from_bool


def test_copy_with_new_literal_recomputes_verdict():
    address = ValidatedAddressLiteral(literal="1.1.1.1")
    updated = address.model_copy(update={"literal": "999.1.1.1"})
    assert updated.is_valid is False
    assert updated.format() == "999.1.1.1 Not Correct"


def test_is_valid_is_serialized():
    dumped = ValidatedAddressLiteral(literal="8.8.8.8").model_dump()
    assert dumped == {"literal": "8.8.8.8", "strict_zero_padding": False, "is_valid": True}


def test_same_literal_same_verdict():
    first = ValidatedAddressLiteral(literal="10.0.0.256")
    second = ValidatedAddressLiteral(literal="10.0.0.256")
    assert first.is_valid == second.is_valid
    assert first == second


def test_models_are_frozen():
    address = ValidatedAddressLiteral(literal="8.8.8.8")
    with pytest.raises(ValidationError):
        address.literal = "1.1.1.1"


def test_copy_is_an_equal_value():
    address = ValidatedAddressLiteral(literal="8.8.8.8")
    copy = address.model_copy()
    assert copy == address
    assert copy is not address


def test_strict_zero_padding_flows_into_verdict():
    assert ValidatedAddressLiteral(literal="01.1.1.1").is_valid is True
    assert ValidatedAddressLiteral(literal="01.1.1.1", strict_zero_padding=True).is_valid is False


def test_both_variants_satisfy_printer_contract():
    assert isinstance(AddressLiteral(literal="x"), AddressPrinter)
    assert isinstance(ValidatedAddressLiteral(literal="x"), AddressPrinter)


def test_verdict_from_address():
    raw = AddressVerdict.from_address(AddressLiteral(literal="10.0.0.1"))
    assert raw.validated is False
    assert raw.is_valid is None
    assert raw.line == "10.0.0.1"

    checked = AddressVerdict.from_address(ValidatedAddressLiteral(literal="8.8.8.8"))
    assert checked.validated is True
    assert checked.is_valid is True
    assert checked.line == "8.8.8.8 Correct"
