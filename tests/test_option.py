## argvee — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import math
import dataclasses

import pytest

from argvee.option import Option, OptionType, OPTION_TYPES
from argvee.errors import InvalidOptionType, ArgveeError


def test_description_string_makes_boolean_option():
    opt = Option.from_descriptor('Description')
    assert opt == Option.from_descriptor({'description': 'Description'})
    assert opt.type == OptionType.BOOLEAN
    assert opt.alias is None


def test_descriptor_copies_description_and_alias():
    opt = Option.from_descriptor({'type': 'string', 'description': 'Name', 'alias': 'n'})
    assert (opt.type, opt.description, opt.alias) == ('string', 'Name', 'n')


def test_default_construction_does_not_raise():
    assert Option().type == OptionType.BOOLEAN
    assert Option.from_descriptor(None) == Option()
    assert Option.from_descriptor({'type': None}).type == OptionType.BOOLEAN


def test_existing_option_is_returned_as_is():
    opt = Option(type=OptionType.NUMBER)
    assert Option.from_descriptor(opt) is opt


def test_invalid_type_raises_with_value():
    with pytest.raises(InvalidOptionType, match="Invalid type invalid") as info:
        Option.from_descriptor({'type': 'invalid'})
    assert info.value.value == 'invalid'
    assert isinstance(info.value, ValueError) and isinstance(info.value, ArgveeError)


def test_options_are_frozen():
    opt = Option('Description')
    with pytest.raises(dataclasses.FrozenInstanceError):
        opt.type = OptionType.NUMBER


def test_requires_value_only_for_non_boolean():
    assert Option().requires_value is False
    for type_ in OPTION_TYPES:
        if type_ != OptionType.BOOLEAN:
            assert Option(type=type_).requires_value is True


def test_parsed_number_values():
    opt = Option(type=OptionType.NUMBER)
    assert opt.parsed_value('13') == 13 and isinstance(opt.parsed_value('13'), int)
    assert opt.parsed_value('-2.5') == -2.5
    assert opt.parsed_value('1e3') == 1000.0
    assert opt.parsed_value('0x10') == 16
    assert opt.parsed_value('0') == 0
    assert math.isinf(opt.parsed_value('Infinity'))


def test_unparseable_number_is_none_not_error():
    opt = Option(type=OptionType.NUMBER)
    for raw in ('NaN', 'nan', 'Test', '', '1_000', '12abc'):
        assert opt.parsed_value(raw) is None


def test_parsed_value_is_identity_for_other_types():
    for type_ in (OptionType.BOOLEAN, OptionType.STRING):
        value = 'value'
        assert Option(type=type_).parsed_value(value) is value
