from Mansion.rooms import MAX_TEXT, create_room, dismantle_rooms, iter_post_order
from Mansion.scenarios import MANSION_CLUES, build_mansion


def find_room(root, name):
    return next((room for room in iter_post_order(root) if room.name == name), None)


def test_create_room_truncates_name_and_clue():
    room = create_room("N" * 80, "C" * 80)
    assert len(room.name) == MAX_TEXT
    assert len(room.clue) == MAX_TEXT
    assert room.left is None and room.right is None


def test_room_without_children_is_dead_end():
    room = create_room("Closet")
    assert room.is_dead_end
    room.left = create_room("Secret Passage")
    assert not room.is_dead_end


def test_take_clue_only_once():
    room = create_room("Study", "Ink stain")
    assert room.take_clue() == "Ink stain"
    assert room.take_clue() == ""
    assert not room.has_clue


def test_post_order_visits_children_before_parent(small_mansion):
    names = [room.name for room in iter_post_order(small_mansion)]
    assert names == ["Lounge", "Kitchen", "Hall"]


def test_dismantle_releases_each_room_once():
    root = build_mansion()
    released = dismantle_rooms(root)
    assert released == [
        "Library", "Master Bedroom", "Study", "Living Room",
        "Pantry", "Garden", "Kitchen", "Entrance Hall",
    ]
    assert len(set(released)) == len(released)
    assert root.left is None and root.right is None


def test_dismantle_empty_tree_is_safe():
    assert dismantle_rooms(None) == []


def test_mansion_layout():
    root = build_mansion()
    assert root.name == "Entrance Hall"
    assert root.left.name == "Living Room"
    assert root.right.name == "Kitchen"
    study = find_room(root, "Study")
    assert study.left is None
    assert study.right.name == "Master Bedroom"
    assert find_room(root, "Garden").is_dead_end
    assert find_room(root, "Attic") is None


def test_map_variant_has_no_clues():
    root = build_mansion()
    assert all(not room.has_clue for room in iter_post_order(root))


def test_clue_variant_places_clues():
    root = build_mansion(with_clues=True)
    for name, clue in MANSION_CLUES.items():
        assert find_room(root, name).clue == clue
