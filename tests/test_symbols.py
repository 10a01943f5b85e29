import pytest

from dxfkit.color import ColorNumber
from dxfkit.formatter import AsciiFormatter, HandleCounter
from dxfkit.symbols import (
    LINE_WIDTH,
    LT_CONTINUOUS,
    LT_HIDDEN,
    LY_0,
    ST_STANDARD,
    AppID,
    BlockRecord,
    DimStyle,
    Layer,
    LineType,
    Style,
    Ucs,
    View,
    Viewport,
)


def lines_of(entry):
    return entry.format_string(AsciiFormatter()).split("\n")


def test_app_id_layout():
    assert lines_of(AppID("ACAD")) == [
        "0", "APPID", "5", "0",
        "100", "AcDbSymbolTableRecord",
        "100", "AcDbRegAppTableRecord",
        "2", "ACAD",
        "70", "0",
        "",
    ]


def test_owner_handle_written_with_code_330():
    owner = AppID("owner")
    owner.handle = 42
    text = View("v", owner=owner).format_string(AsciiFormatter())
    assert AsciiFormatter().format_hex(330, 42) in text


def test_no_owner_means_no_330():
    text = View("v").format_string(AsciiFormatter())
    assert "330" not in text.split("\n")


def test_dim_style_uses_code_105_for_handle():
    ds = DimStyle("Standard")
    ds.set_handle(HandleCounter(26))
    text = ds.format_string(AsciiFormatter())
    expected = AsciiFormatter().format_hex(105, ds.handle)
    assert expected in text
    assert text.index(expected) < text.index("AcDbSymbolTableRecord")
    assert "\n5\n" not in text


def test_set_handle_takes_consecutive_values():
    counter = HandleCounter(7)
    first, second = AppID("a"), Ucs("b")
    first.set_handle(counter)
    second.set_handle(counter)
    assert first.handle == 7
    assert second.handle == first.handle + 1
    assert counter.value == second.handle + 1


def test_str_matches_default_formatter():
    entry = BlockRecord("*Model_Space")
    assert str(entry) == entry.format_string(AsciiFormatter())


def test_format_string_drains_formatter():
    formatter = AsciiFormatter()
    AppID("x").format_string(formatter)
    assert formatter.output() == ""


def test_block_record_tail():
    assert lines_of(BlockRecord("*Paper_Space"))[-7:] == [
        "70", "0", "280", "1", "281", "0", "",
    ]


def test_ucs_and_view_end_with_name():
    assert lines_of(Ucs("u"))[-3:] == ["2", "u", ""]
    assert "AcDbUCSTableRecord" in lines_of(Ucs("u"))
    assert "AcDbViewTableRecord" in lines_of(View("w"))


def test_viewport_group_codes_in_order():
    vp = Viewport()
    vp.name = "*ACTIVE"
    lines = lines_of(vp)
    codes = lines[0:-1:2]
    assert codes == [
        "0", "5", "100", "100", "2", "70",
        "10", "20", "11", "21", "12", "22", "13", "23", "14", "24", "15", "25",
        "16", "26", "36", "17", "27", "37",
        "40", "41", "42", "43", "44", "50", "51",
    ]
    assert lines[lines.index("2") + 1] == "*ACTIVE"


def test_viewport_defaults_written():
    text = Viewport().format_string(AsciiFormatter())
    f = AsciiFormatter()
    assert f.format_float(40, 400.0) in text
    assert f.format_float(42, 50.0) in text


def test_style_defaults_and_tail():
    style = Style("Mine")
    assert style.font_name == "arial.ttf"
    assert style.last_height_used == 100.0
    assert lines_of(style)[-5:] == ["3", "arial.ttf", "4", "", ""]


def test_line_type_total_length():
    assert LT_HIDDEN.total_length() == pytest.approx(0.375)
    assert LineType("x").total_length() == 0.0


def test_line_type_total_length_ignores_sign():
    a = LineType("a", "", [1.5, -2.5])
    b = LineType("b", "", [-1.5, 2.5])
    assert a.total_length() == b.total_length()


def test_line_type_lengths_are_floats():
    lt = LineType("a", "", [1, -2])
    assert lt.lengths == [1.0, -2.0]
    assert lt.total_length() == 3.0
    assert ("49", "1.000000") in list(zip(lines_of(lt)[0::2], lines_of(lt)[1::2]))


def test_line_type_format_counts_dashes():
    lt = LineType("DASHED", "dashes", [0.5, -0.25, 0.0])
    lines = lines_of(lt)
    codes = lines[0:-1:2]
    assert codes.count("49") == len(lt.lengths)
    assert codes.count("74") == len(lt.lengths)
    assert lines[lines.index("73") + 1] == str(len(lt.lengths))
    assert lines[lines.index("72") + 1] == "65"
    assert AsciiFormatter().format_float(40, lt.total_length()) in "\n".join(lines)


def test_layer_default_line_width():
    assert Layer("a").line_width == -3


@pytest.mark.parametrize("width", sorted(LINE_WIDTH))
def test_layer_line_width_allowed_value_kept(width):
    layer = Layer("a")
    assert layer.set_line_width(width) == width
    assert layer.line_width == width


def test_layer_line_width_limits():
    layer = Layer("a")
    assert layer.set_line_width(500) == 211
    assert layer.set_line_width(-10) == -3
    assert layer.line_width == -3


@pytest.mark.parametrize("width", [w for w in range(0, 211) if w not in LINE_WIDTH])
def test_layer_line_width_snaps_up(width):
    result = Layer("a").set_line_width(width)
    assert result in LINE_WIDTH
    assert result > width
    assert not any(width < key < result for key in LINE_WIDTH)


def test_layer_freeze_and_lock_flags():
    layer = Layer("a")
    layer.freeze()
    layer.lock()
    assert layer.flag & 1
    assert layer.flag & 4
    layer.unfreeze()
    assert layer.flag & 1 == 0
    assert layer.flag & 4
    layer.unlock()
    assert layer.flag == 0


def test_layer_color_coerced():
    assert Layer("x", 1).color == ColorNumber.RED


def test_layer_format_fields():
    plot = Style("ps")
    plot.handle = 33
    layer = Layer("walls", ColorNumber.RED, LT_HIDDEN, plot_style=plot)
    text = layer.format_string(AsciiFormatter())
    f = AsciiFormatter()
    assert f.format_int(62, int(ColorNumber.RED)) in text
    assert f.format_string(6, "HIDDEN") in text
    assert f.format_int(370, -3) in text
    assert text.endswith(f.format_hex(390, 33))


def test_defaults():
    assert LY_0.name == "0"
    assert LY_0.line_type is LT_CONTINUOUS
    assert LT_CONTINUOUS.total_length() == 0.0
    assert "Standard" in lines_of(ST_STANDARD)
    assert lines_of(LT_CONTINUOUS)[lines_of(LT_CONTINUOUS).index("3") + 1] == "Solid Line"