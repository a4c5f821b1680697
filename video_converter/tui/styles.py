"""
Centralized Textual CSS for the terminal UI.
"""

from video_converter.tui.theme import (
    BLACK,
    CHARCOAL_GRAY,
    CORAL_PINK,
    DARK_GRAY,
    OFF_WHITE,
    ORANGE,
    TEAL_GREEN,
)


APP_CSS = """
Screen {
    background: %(BLACK)s;
    color: %(OFF_WHITE)s;
}
#root {
    height: 1fr;
    layout: vertical;
    background: %(DARK_GRAY)s;
}
#actions {
    height: auto;
    border: heavy %(ORANGE)s;
    margin: 1 1 0 1;
    padding: 1;
    background: %(CHARCOAL_GRAY)s;
}
#panes {
    height: 1fr;
    margin: 0 1 1 1;
}
#form-pane, #log-pane {
    border: solid %(ORANGE)s;
    background: %(CHARCOAL_GRAY)s;
    padding: 1;
}
#form-pane {
    width: 60;
    margin-right: 1;
}
#log-pane {
    width: 1fr;
}
.field {
    margin-bottom: 1;
}
.path-row {
    height: auto;
}
.path-row Input {
    width: 1fr;
}
#status-text {
    color: %(TEAL_GREEN)s;
    margin-top: 1;
}
#status-text.-error {
    color: %(CORAL_PINK)s;
}
.label {
    color: %(ORANGE)s;
    text-style: bold;
}
Button {
    background: %(BLACK)s;
    color: %(OFF_WHITE)s;
    border: solid %(ORANGE)s;
    margin-right: 1;
}
Button.-primary {
    color: %(BLACK)s;
    background: %(ORANGE)s;
}
""" % {
    "BLACK": BLACK,
    "DARK_GRAY": DARK_GRAY,
    "CHARCOAL_GRAY": CHARCOAL_GRAY,
    "ORANGE": ORANGE,
    "TEAL_GREEN": TEAL_GREEN,
    "CORAL_PINK": CORAL_PINK,
    "OFF_WHITE": OFF_WHITE,
}


PATH_PICKER_CSS = """
PathPickerModal {
    align: center middle;
    background: %(BLACK)s;
}
#picker-root {
    width: 96;
    height: 90%%;
    border: heavy %(ORANGE)s;
    background: %(CHARCOAL_GRAY)s;
    padding: 1 2;
    layout: vertical;
}
#picker-title {
    color: %(ORANGE)s;
    text-style: bold;
    margin-bottom: 1;
}
#picker-tree {
    height: 1fr;
    border: round %(ORANGE)s;
    margin: 1 0;
}
#picker-error {
    color: %(CORAL_PINK)s;
    height: 2;
}
#picker-actions {
    height: auto;
}
Button {
    margin-right: 1;
    color: %(OFF_WHITE)s;
    border: solid %(ORANGE)s;
    background: %(BLACK)s;
}
Button.-primary {
    color: %(BLACK)s;
    background: %(ORANGE)s;
}
""" % {
    "BLACK": BLACK,
    "CHARCOAL_GRAY": CHARCOAL_GRAY,
    "CORAL_PINK": CORAL_PINK,
    "OFF_WHITE": OFF_WHITE,
    "ORANGE": ORANGE,
}
