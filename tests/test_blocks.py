from dxfkit.blocks import Block, Blocks
from dxfkit.formatter import AsciiFormatter, HandleCounter
from dxfkit.symbols import Layer


def _pairs(text):
    lines = text.split("\n")[:-1]
    return list(zip(lines[0::2], lines[1::2]))


def test_default_blocks():
    blocks = Blocks()
    assert [block.name for block in blocks] == ["*Model_Space", "*Paper_Space", "*Paper_Space0"]
    assert all(block.layer.name == "0" for block in blocks)


def test_block_format_layout():
    block = Block("frame", "outer frame")
    pairs = _pairs(block.format_string(AsciiFormatter()))
    assert pairs[0] == ("0", "BLOCK")
    assert pairs[-1] == ("100", "AcDbBlockEnd")
    assert ("2", "frame") in pairs
    assert ("3", "frame") in pairs
    assert ("1", "outer frame") in pairs
    assert pairs.count(("8", "0")) == 2
    assert ("0", "ENDBLK") in pairs
    assert pairs.index(("100", "AcDbBlockBegin")) < pairs.index(("0", "ENDBLK"))


def test_block_uses_its_layer():
    block = Block("b", layer=Layer("walls"))
    pairs = _pairs(str(block))
    assert pairs.count(("8", "walls")) == 2


def test_block_set_handle_takes_two():
    block = Block("b")
    counter = HandleCounter(10)
    block.set_handle(counter)
    assert block.handle == 10
    assert block.end_handle == 11
    assert counter.value == 12
    pairs = _pairs(str(block))
    probe = AsciiFormatter()
    assert tuple(probe.format_hex(5, 11).split("\n")[:2]) in pairs


def test_blocks_set_handle_consecutive():
    blocks = Blocks()
    counter = HandleCounter(1)
    blocks.set_handle(counter)
    handles = [h for block in blocks for h in (block.handle, block.end_handle)]
    assert handles == list(range(1, 1 + 2 * len(blocks)))
    assert counter.value == 1 + 2 * len(blocks)


def test_blocks_section_format():
    blocks = Blocks()
    blocks.add(Block("extra"))
    formatter = AsciiFormatter()
    blocks.format(formatter)
    pairs = _pairs(formatter.output())
    assert pairs[:2] == [("0", "SECTION"), ("2", "BLOCKS")]
    assert pairs[-1] == ("0", "ENDSEC")
    assert pairs.count(("0", "BLOCK")) == len(blocks) == 4
    assert blocks[3].name == "extra"