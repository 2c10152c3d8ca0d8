import pytest

from gedcom_importer.core import SosaPersistenceError
from gedcom_importer.sosa import SosaCalculator, SosaState, compute_sosa_numbers
from gedcom_importer.storage import Person


# ---------------------------------------------------------------------------
# Pure traversal
# ---------------------------------------------------------------------------

def test_root_is_one_and_parents_double():
    parents = {
        "me": ("dad", "mum"),
        "dad": ("gf", "gm"),
        "mum": (None, "mgm"),
        "gf": (None, None),
        "gm": (None, None),
        "mgm": (None, None),
    }
    numbers = compute_sosa_numbers("me", parents)

    assert numbers == {"me": 1, "dad": 2, "mum": 3, "gf": 4, "gm": 5, "mgm": 7}


def test_parents_outside_the_tree_are_ignored():
    numbers = compute_sosa_numbers("me", {"me": ("ghost", None)})
    assert numbers == {"me": 1}


def test_unknown_root_gives_nothing():
    assert compute_sosa_numbers("x", {"me": (None, None)}) == {}


def test_pedigree_collapse_last_writer_wins():
    # dad and mum share the same father: cousin marriage
    parents = {
        "me": ("dad", "mum"),
        "dad": ("shared", None),
        "mum": ("shared", None),
        "shared": (None, None),
    }
    numbers = compute_sosa_numbers("me", parents)
    assert numbers["shared"] == 6


def test_deep_pedigree_exceeds_64_bits():
    depth = 70
    parents = {f"p{i}": (f"p{i + 1}", None) for i in range(depth)}
    parents[f"p{depth}"] = (None, None)

    numbers = compute_sosa_numbers("p0", parents)

    assert numbers[f"p{depth}"] == 2 ** depth
    assert numbers[f"p{depth}"] > 2 ** 63


def test_parent_cycle_terminates():
    parents = {"a": ("b", None), "b": ("a", None)}
    numbers = compute_sosa_numbers("a", parents)
    assert set(numbers) == {"a", "b"}


# ---------------------------------------------------------------------------
# Calculator against the store
# ---------------------------------------------------------------------------

def _person(store, tree, name, father=None, mother=None):
    p = Person(tree_id=tree.id, first_name=name, father_id=father, mother_id=mother)
    store.add(p)
    return p


@pytest.fixture
def family(store, tree):
    gf = _person(store, tree, "gf")
    gm = _person(store, tree, "gm")
    dad = _person(store, tree, "dad", gf.id, gm.id)
    mum = _person(store, tree, "mum")
    me = _person(store, tree, "me", dad.id, mum.id)
    sibling = _person(store, tree, "sibling", dad.id, mum.id)
    tree.root_person_id = me.id
    store.add(tree)
    store.commit()
    return {"gf": gf, "gm": gm, "dad": dad, "mum": mum, "me": me, "sibling": sibling}


def test_calculator_persists_numbers(store, tree, family):
    calc = SosaCalculator(store, batch_size=2)
    calc.calculate(tree.id)

    numbers = store.sosa_numbers(tree.id)
    by_name = {name: numbers.get(p.id) for name, p in family.items()}
    assert by_name == {"gf": 4, "gm": 5, "dad": 2, "mum": 3, "me": 1, "sibling": None}
    assert calc.state is SosaState.IDLE


def test_calculator_invariants(store, tree, family):
    SosaCalculator(store).calculate(tree.id)
    numbers = store.sosa_numbers(tree.id)
    parents = store.person_parent_projection(tree.id)

    for pid, n in numbers.items():
        father, mother = parents[pid]
        if father in parents:
            assert numbers[father] == 2 * n
        if mother in parents:
            assert numbers[mother] == 2 * n + 1


def test_recompute_is_deterministic_and_clears_stale(store, tree, family):
    calc = SosaCalculator(store)
    calc.calculate(tree.id)
    first = store.sosa_numbers(tree.id)
    calc.calculate(tree.id)
    assert store.sosa_numbers(tree.id) == first

    # re-root on the sibling: "me" loses its number
    tree.root_person_id = family["sibling"].id
    store.add(tree)
    store.commit()
    calc.calculate(tree.id)

    numbers = store.sosa_numbers(tree.id)
    assert numbers[family["sibling"].id] == 1
    assert family["me"].id not in numbers


def test_deep_pedigree_is_stored_exactly(store, tree):
    depth = 70
    ancestor = _person(store, tree, f"g{depth}")
    for i in range(depth - 1, -1, -1):
        ancestor = _person(store, tree, f"g{i}", father=ancestor.id)
    tree.root_person_id = ancestor.id
    store.add(tree)
    store.commit()

    SosaCalculator(store, batch_size=16).calculate(tree.id)

    numbers = store.sosa_numbers(tree.id)
    assert len(numbers) == depth + 1
    assert max(numbers.values()) == 2 ** depth


def test_tree_without_root_is_noop(store, tree):
    _person(store, tree, "alone")
    store.commit()

    SosaCalculator(store).calculate(tree.id)
    assert store.sosa_numbers(tree.id) == {}


def test_dangling_root_clears_numbers(store, tree, family):
    calc = SosaCalculator(store)
    calc.calculate(tree.id)

    tree.root_person_id = "not-a-person"
    store.add(tree)
    store.commit()
    calc.calculate(tree.id)

    assert store.sosa_numbers(tree.id) == {}


def test_write_failure_rolls_back(store, tree, family, monkeypatch):
    real_update = store.update_sosa_many
    calls = []

    def failing_update(rows):
        calls.append(rows)
        if len(calls) > 1:
            raise RuntimeError("write failed")
        real_update(rows)

    monkeypatch.setattr(store, "update_sosa_many", failing_update)
    calc = SosaCalculator(store, batch_size=1)

    with pytest.raises(SosaPersistenceError):
        calc.calculate(tree.id)

    assert len(calls) == 2
    assert store.sosa_numbers(tree.id) == {}
    assert calc.state is SosaState.IDLE
