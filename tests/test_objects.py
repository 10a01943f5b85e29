import pytest

from dxfkit.formatter import AsciiFormatter, HandleCounter
from dxfkit.objects import AcDbDictionaryWDFLT, AcDbPlaceHolder, Dictionary, Group, Objects
from dxfkit.shapes import Point


def _pairs(text):
    lines = text.split("\n")[:-1]
    return list(zip(lines[0::2], lines[1::2]))


def _hex_pair(code, value):
    return tuple(AsciiFormatter().format_hex(code, value).split("\n")[:2])


def test_dictionary_sorted_keys():
    dictionary = Dictionary()
    dictionary.add_item("b", AcDbPlaceHolder())
    dictionary.add_item("a", AcDbPlaceHolder())
    pairs = _pairs(dictionary.format_string(AsciiFormatter()))
    assert pairs[0] == ("0", "DICTIONARY")
    assert [value for code, value in pairs if code == "3"] == ["a", "b"]


def test_dictionary_duplicate_key():
    dictionary = Dictionary()
    dictionary.add_item("k", AcDbPlaceHolder())
    with pytest.raises(ValueError):
        dictionary.add_item("k", AcDbPlaceHolder())


def test_dictionary_set_handle_recurses():
    dictionary = Dictionary()
    first, second = AcDbPlaceHolder(), AcDbPlaceHolder()
    dictionary.add_item("x", first)
    dictionary.add_item("y", second)
    counter = HandleCounter(1)
    dictionary.set_handle(counter)
    assert dictionary.handle == 1
    assert sorted([first.handle, second.handle]) == [2, 3]
    assert counter.value == 4
    pairs = _pairs(str(dictionary))
    assert _hex_pair(350, first.handle) in pairs


def test_placeholder_without_owner():
    placeholder = AcDbPlaceHolder()
    assert _pairs(str(placeholder)) == [("0", "ACDBPLACEHOLDER"), ("5", "0")]


def test_dictionary_with_default():
    owner = Dictionary()
    wdflt, placeholder = AcDbDictionaryWDFLT.with_placeholder(owner)
    assert placeholder.owner is wdflt
    assert wdflt.entries == {"Normal": placeholder}
    counter = HandleCounter(7)
    owner.set_handle(counter)
    wdflt.set_handle(counter)
    placeholder.set_handle(counter)
    pairs = _pairs(wdflt.format_string(AsciiFormatter()))
    assert pairs[0] == ("0", "ACDBDICTIONARYWDFLT")
    assert pairs.count(_hex_pair(330, owner.handle)) == 2
    assert ("3", "Normal") in pairs
    assert pairs[-1] == _hex_pair(340, placeholder.handle)
    assert ("100", "AcDbDictionaryWithDefault") in pairs
    with pytest.raises(ValueError):
        wdflt.add_item("Normal", AcDbPlaceHolder())


def test_group_owner_and_entities():
    groups = Dictionary()
    first = Point([1.0, 2.0, 3.0])
    second = Point([4.0, 5.0, 6.0])
    group = Group("g", "demo", [first])
    group.set_owner(groups)
    assert groups.entries["g"] is group
    assert first.block_record is None
    group.add_entity(second)
    assert second.block_record is group
    counter = HandleCounter(3)
    for item in (first, second, groups, group):
        item.set_handle(counter)
    pairs = _pairs(group.format_string(AsciiFormatter()))
    assert pairs[0] == ("0", "GROUP")
    assert ("300", "demo") in pairs
    assert ("71", "1") in pairs
    assert [p for p in pairs if p[0] == "340"] == [
        _hex_pair(340, first.handle), _hex_pair(340, second.handle)
    ]


def test_group_not_selectable():
    group = Group("g", selectable=False)
    group.set_owner(Dictionary())
    assert ("71", "0") in _pairs(str(group))


def test_group_without_owner_cannot_format():
    with pytest.raises(ValueError):
        Group("lonely").format(AsciiFormatter())


def test_objects_section():
    objects = Objects()
    dictionary = Dictionary()
    placeholder = AcDbPlaceHolder()
    objects.add(dictionary)
    objects.add(placeholder)
    counter = HandleCounter(1)
    objects.set_handle(counter)
    assert (dictionary.handle, placeholder.handle) == (1, 2)
    formatter = AsciiFormatter()
    objects.format(formatter)
    pairs = _pairs(formatter.output())
    assert pairs[:2] == [("0", "SECTION"), ("2", "OBJECTS")]
    assert pairs[-1] == ("0", "ENDSEC")
    assert len(objects) == 2