from collections import Counter

import pytest

from advent24.day09 import (
    checksum,
    compact_blocks,
    compact_files,
    expand,
    parse_disk_map,
)

EXAMPLE = "2333133121414131402"


def _blocks(text):
    return expand(parse_disk_map(text))


def test_expand_small_map():
    assert _blocks("12345") == [0, None, None, 1, 1, 1, None, None, None, None, 2, 2, 2, 2, 2]


def test_example_block_compaction_checksum():
    assert checksum(compact_blocks(_blocks(EXAMPLE))) == 1928


def test_example_file_compaction_checksum():
    assert checksum(compact_files(_blocks(EXAMPLE))) == 2858


def test_parse_rejects_non_digits():
    with pytest.raises(ValueError):
        parse_disk_map("12a4")


def test_parse_strips_whitespace():
    assert parse_disk_map(" 123\n") == parse_disk_map("123")


def test_expand_length_is_sum_of_digits():
    digits = parse_disk_map(EXAMPLE)
    assert len(expand(digits)) == sum(digits)


def test_compact_blocks_keeps_every_file_block():
    blocks = _blocks(EXAMPLE)
    compacted = compact_blocks(blocks)
    assert None not in compacted
    assert Counter(compacted) == Counter(b for b in blocks if b is not None)


def test_compact_files_keeps_length_and_blocks():
    blocks = _blocks(EXAMPLE)
    compacted = compact_files(blocks)
    assert len(compacted) == len(blocks)
    assert Counter(compacted) == Counter(blocks)


def test_compact_files_keeps_files_contiguous():
    compacted = compact_files(_blocks(EXAMPLE))
    positions = {}
    for index, block in enumerate(compacted):
        if block is not None:
            positions.setdefault(block, []).append(index)
    for indices in positions.values():
        assert indices == list(range(indices[0], indices[0] + len(indices)))


def test_compact_files_does_not_modify_input():
    blocks = _blocks(EXAMPLE)
    original = list(blocks)
    compact_files(blocks)
    assert blocks == original


def test_no_free_space_leaves_disk_unchanged():
    blocks = _blocks("909")
    assert compact_blocks(blocks) == blocks
    assert compact_files(blocks) == blocks


def test_file_compaction_never_beats_block_compaction():
    blocks = _blocks(EXAMPLE)
    assert checksum(compact_blocks(blocks)) <= checksum(compact_files(blocks))