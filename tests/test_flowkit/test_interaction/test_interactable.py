import pytest

from flowkit.interaction.interactable import Interactable, Interaction
from flowkit.interaction.selector import InteractionSelector


@pytest.fixture
def chain():
    """Interactable with A -> B -> C, each step logging its id."""
    log = []
    a = Interaction("A", effects=[lambda: log.append("A")])
    b = Interaction("B", effects=[lambda: log.append("B")])
    c = Interaction("C", effects=[lambda: log.append("C")])
    a.next = b
    b.next = c
    return Interactable("npc", [a, b, c]), log


def test_first_interaction_starts_active(chain):
    npc, _ = chain

    assert npc.active.id == "A"
    assert npc.get_interaction("A").is_active


def test_chain_runs_in_order(chain):
    npc, log = chain

    npc.interact()
    npc.interact()
    npc.interact()

    assert log == ["A", "B", "C"]
    assert npc.active is None


def test_interact_with_nothing_active_only_notifies(chain):
    npc, log = chain
    interacted = []
    npc.on_interacted.append(lambda: interacted.append(True))

    for _ in range(4):
        npc.interact()

    assert log == ["A", "B", "C"]
    assert len(interacted) == 4


def test_effect_can_override_next(chain):
    npc, log = chain
    a = npc.get_interaction("A")
    c = npc.get_interaction("C")
    a.effects.append(c.activate)

    npc.interact()

    assert npc.active is c
    npc.interact()
    assert log == ["A", "C"]


def test_on_executed_fires_after_effects(chain):
    npc, log = chain
    greet = npc.get_interaction("A")
    greet.on_executed.append(lambda: log.append("executed"))

    npc.interact()
    npc.interact()

    assert log == ["A", "executed", "B"]


def test_at_most_one_active(chain):
    npc, _ = chain

    npc.get_interaction("C").activate()

    assert [i.id for i in npc.interactions if i.is_active] == ["C"]


def test_interaction_can_loop_to_itself():
    log = []
    idle = Interaction("idle", effects=[lambda: log.append("idle")])
    idle.next = idle
    npc = Interactable("npc", [idle])

    npc.interact()
    npc.interact()

    assert log == ["idle", "idle"]
    assert npc.active is idle


def test_reset_rearms_first(chain):
    npc, _ = chain
    npc.interact()
    npc.interact()

    npc.reset()

    assert npc.active.id == "A"


def test_foreign_interaction_is_rejected(chain):
    npc, _ = chain
    other = Interactable("other", [Interaction("X")])

    with pytest.raises(ValueError):
        npc.activate(other.get_interaction("X"))

    with pytest.raises(ValueError):
        npc.add_interaction(other.get_interaction("X"))


def test_unowned_interaction_activate_warns(caplog):
    Interaction("loose").activate()

    assert "has no Interactable" in caplog.text


def test_selector_selects_and_interacts(chain):
    npc, log = chain
    events = []
    npc.on_selected.append(lambda: events.append("selected"))
    npc.on_deselected.append(lambda: events.append("deselected"))
    selector = InteractionSelector()

    assert not selector.interact()

    selector.enter(npc)
    assert selector.selected is npc
    assert selector.interact()
    assert log == ["A"]

    selector.exit(npc)
    assert selector.selected is None
    assert events == ["selected", "deselected"]


def test_selector_replaces_selection():
    first = Interactable("first")
    second = Interactable("second")
    events = []
    first.on_deselected.append(lambda: events.append("first out"))
    selector = InteractionSelector()

    selector.enter(first)
    selector.enter(second)
    selector.exit(first)

    assert selector.selected is second
    assert events == ["first out"]
