from ouroboros import gui


def test_init_gui(capsys):
    gui.init_gui()
    assert capsys.readouterr().out == "[GUI] GUI initialized (simulated)\n"


def test_draw_window(capsys):
    gui.draw_window("Main", 640, 480)
    assert capsys.readouterr().out == "[GUI] Window 'Main' drawn [640 x 480] (simulated)\n"


def test_draw_label(capsys):
    gui.draw_label("Hello")
    assert capsys.readouterr().out == '[GUI] Label: "Hello" (simulated)\n'


def test_draw_button(capsys):
    gui.draw_button("OK")
    assert capsys.readouterr().out == "[GUI] Button: [OK] (simulated)\n"


def test_message_loop(capsys):
    gui.gui_message_loop()
    assert capsys.readouterr().out == "[GUI] Message loop (simulated)\n"