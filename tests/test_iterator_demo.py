from patternbook import iterator_demo


def _lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_demo_queue_heading_and_enqueues(capsys):
    iterator_demo.demo_queue()
    lines = _lines(capsys)
    assert "TESTING QUEUE FUNCTIONALITY" in lines
    enqueued = [line for line in lines if line.startswith("Enqueued: ")]
    assert len(enqueued) == 5
    assert "Queue size: 5" in lines


def test_demo_queue_cursor_without_begin(capsys):
    iterator_demo.demo_queue()
    lines = _lines(capsys)
    assert "Distance from it1 to it2: -1" in lines
    assert "Iterator 1 before Iterator 2: No" in lines


def test_demo_queue_step_back_stays_put(capsys):
    iterator_demo.demo_queue()
    lines = _lines(capsys)
    start = next(l for l in lines if l.startswith("Starting at position: "))
    after = next(l for l in lines if l.startswith("After one step back: "))
    assert start.split(": ")[1] == after.split(": ")[1]


def test_demo_queue_drains_in_fifo_order(capsys):
    iterator_demo.demo_queue()
    lines = _lines(capsys)
    enqueued = [l.split(": ")[1] for l in lines if l.startswith("Enqueued: ")]
    drained = next(l for l in lines if l.startswith("Dequeuing in FIFO order: "))
    assert drained.split(": ")[1].split() == enqueued


def test_demo_circular_list_search(capsys):
    iterator_demo.demo_circular_list()
    lines = _lines(capsys)
    assert "TESTING CIRCULAR LIST FUNCTIONALITY" in lines
    assert "Looking for value 30: Found" in lines
    assert "List size: 5" in lines


def test_demo_circular_list_removal_drops_value(capsys):
    iterator_demo.demo_circular_list()
    lines = _lines(capsys)
    before = next(l for l in lines if l.startswith("After inserting 25 at index 3: "))
    after = next(l for l in lines if l.startswith("After removing value 25: "))
    assert " 25 " in before
    assert " 25 " not in after


def test_demo_circular_list_reversal_reverses(capsys):
    iterator_demo.demo_circular_list()
    lines = _lines(capsys)
    before = next(l for l in lines if l.startswith("Before reversal: "))
    after = next(l for l in lines if l.startswith("After reversal: "))
    before_items = before.split(": ", 1)[1].split(" -> (back")[0].split(" -> ")
    after_items = after.split(": ", 1)[1].split(" -> (back")[0].split(" -> ")
    assert after_items == before_items[::-1]


def test_demo_iterator_comparison(capsys):
    iterator_demo.demo_iterator_comparison()
    lines = _lines(capsys)
    assert "Queue iterator advanced beyond end - valid: No" in lines
    queue_line = next(l for l in lines if l.startswith("Queue iteration: "))
    assert len(queue_line.split(": ")[1].split()) == 4
    circular_line = next(l for l in lines if l.startswith("Circular List iteration: "))
    assert circular_line.split(": ")[1].split() == []


def test_demo_iterator_comparison_same_after_two_steps(capsys):
    iterator_demo.demo_iterator_comparison()
    lines = _lines(capsys)
    q = next(l for l in lines if l.startswith("Queue iterator advanced 2 positions: "))
    c = next(l for l in lines if l.startswith("Circular list iterator advanced 2 positions: "))
    assert q.split(": ")[1] == c.split(": ")[1]


def test_demo_advanced_iterator_features(capsys):
    iterator_demo.demo_advanced_iterator_features()
    lines = _lines(capsys)
    assert "Iterator 1 at: A" in lines
    assert "Iterator 2 at: D" in lines
    assert "Distance from it1 to it2: 3" in lines
    assert "Iterator after reset: A" in lines


def test_demo_special_circular_iterator(capsys):
    iterator_demo.demo_special_circular_iterator()
    lines = _lines(capsys)
    shown = next(l for l in lines if l.startswith("Showing 2 complete rotations: "))
    assert shown == "Showing 2 complete rotations: 1 2 3 1 2 3 "


def test_demonstrate_pattern_benefits(capsys):
    iterator_demo.demonstrate_pattern_benefits()
    lines = _lines(capsys)
    assert "DEMONSTRATING ITERATOR PATTERN BENEFITS" in lines
    assert "=" * 60 in lines
    assert "4. EXTENSIBILITY:" in lines


def test_main_completes(capsys):
    assert iterator_demo.main() == 0
    lines = _lines(capsys)
    assert lines[0] == "*" * 70
    assert "DEMONSTRATION COMPLETED SUCCESSFULLY!" in lines