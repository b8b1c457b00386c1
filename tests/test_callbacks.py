from rigsmith.callbacks import CallbackCollection


def test_ids_start_at_zero_and_increase():
    callbacks = CallbackCollection()
    assert callbacks.add(lambda: None) == 0
    assert callbacks.add(lambda: None) == 1
    assert len(callbacks) == 2


def test_call_passes_arguments_in_order():
    callbacks = CallbackCollection()
    seen = []
    callbacks.add(lambda a, b: seen.append(("first", a, b)))
    callbacks.add(lambda a, b: seen.append(("second", a, b)))
    callbacks("x", 5)
    assert seen == [("first", "x", 5), ("second", "x", 5)]


def test_removed_callback_is_not_called():
    callbacks = CallbackCollection()
    seen = []
    first = callbacks.add(lambda: seen.append("first"))
    callbacks.add(lambda: seen.append("second"))
    callbacks.remove(first)
    callbacks()
    assert seen == ["second"]
    assert len(callbacks) == 1


def test_remove_unknown_id_is_ignored():
    callbacks = CallbackCollection()
    callbacks.add(lambda: None)
    callbacks.remove(42)
    assert len(callbacks) == 1


def test_ids_are_not_reused_after_remove():
    callbacks = CallbackCollection()
    first = callbacks.add(lambda: None)
    callbacks.remove(first)
    second = callbacks.add(lambda: None)
    assert second > first