from runngun.render import GREEN, RED, WHITE, DrawCommand, Renderer


def test_records_rectangle():
    r = Renderer()
    r.filled_rectangle(1, 2, 3, 4, GREEN)
    assert r.commands == [DrawCommand("rectangle", (1, 2, 3, 4, GREEN))]


def test_records_circle_and_line_in_order():
    r = Renderer()
    r.filled_circle(10, 20, 2, RED)
    r.line(5, 6, 5, 60, GREEN, 10)
    assert [c.kind for c in r.commands] == ["circle", "line"]
    assert r.commands[0].args == (10, 20, 2, RED)
    assert r.commands[1].args == (5, 6, 5, 60, GREEN, 10)


def test_records_bitmap_and_text():
    r = Renderer()
    sprite = object()
    r.bitmap_region(sprite, 256, 0, 256, 256, 40, 50)
    r.text(10, 10, "HEALTH: 5", WHITE)
    assert r.commands[0] == DrawCommand("bitmap", (sprite, 256, 0, 256, 256, 40, 50))
    assert r.commands[1] == DrawCommand("text", (10, 10, "HEALTH: 5", WHITE))


def test_renderers_do_not_share_commands():
    a = Renderer()
    b = Renderer()
    a.filled_circle(0, 0, 1, RED)
    assert len(a.commands) == 1
    assert b.commands == []