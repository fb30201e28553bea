import pytest

from xvtools import layout


def test_round_up_and_down_at_page_edges():
    assert layout.pg_round_up(0) == 0
    assert layout.pg_round_up(1) == layout.PGSIZE
    assert layout.pg_round_up(layout.PGSIZE) == layout.PGSIZE
    assert layout.pg_round_down(layout.PGSIZE + 1) == layout.PGSIZE
    assert layout.pg_round_down(layout.PGSIZE - 1) == 0


@pytest.mark.parametrize("value", [0, 1, 4095, 4096, 4097, 123456789])
def test_rounding_invariants(value):
    up = layout.pg_round_up(value)
    down = layout.pg_round_down(value)
    assert up % layout.PGSIZE == 0
    assert down % layout.PGSIZE == 0
    assert down <= value <= up
    assert up - down in (0, layout.PGSIZE)


@pytest.mark.parametrize("page", [0, 1, 7, 0x80000, 0x87FFF])
def test_pte_round_trip(page):
    pa = page * layout.PGSIZE
    pte = layout.pa2pte(pa) | layout.PTE_V | layout.PTE_R | layout.PTE_U
    assert layout.pte2pa(pte) == pa
    assert layout.pte_flags(pte) == layout.PTE_V | layout.PTE_R | layout.PTE_U


def test_pte_flags_ignore_address_bits():
    pte = layout.pa2pte(0x80000000)
    assert layout.pte_flags(pte) == 0


@pytest.mark.parametrize("va", [0, 0x1234, 0x3FFFFFF000, layout.MAXVA - 1, 0xABCDEF123])
def test_px_indices_reconstruct_address(va):
    rebuilt = va & (layout.PGSIZE - 1)
    for level in range(3):
        index = layout.px(level, va)
        assert 0 <= index <= layout.PXMASK
        rebuilt |= index << (layout.PGSHIFT + 9 * level)
    assert rebuilt == va


def test_make_satp_selects_sv39_and_page_number():
    pagetable = 0x87654000
    satp = layout.make_satp(pagetable)
    assert satp >> 60 == 8
    assert (satp & ((1 << 44) - 1)) << 12 == pagetable