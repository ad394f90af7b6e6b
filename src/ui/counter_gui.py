"""
DearPyGui UI for charcount
Lets the user pick a profile or type a target/string and shows the report line.
"""
import sys

import dearpygui.dearpygui as dpg

from common.config import DEFAULT_PROFILE, load_config_document
from common.errors import CounterError
from common.text import parse_target
from core.reporting import ListReporter
from ui.workflow_backend import run_count

ERROR_WINDOW = "charcount_error_window"


def show_error(error, log_window):
    dpg.set_value(log_window, dpg.get_value(log_window) + f"Error: {error}\n")
    if dpg.does_item_exist(ERROR_WINDOW):
        dpg.delete_item(ERROR_WINDOW)
    with dpg.window(label="Error", tag=ERROR_WINDOW, modal=True, no_close=False, width=400, height=120):
        dpg.add_text(f"An error occurred:\n{error}")
        dpg.add_button(label="Close", callback=lambda: dpg.delete_item(ERROR_WINDOW))


def run_scan(target_literal, text, profile, result_text, log_window):
    reporter = ListReporter()
    try:
        document = load_config_document(profile_name=profile)
        run_count(
            parse_target(target_literal),
            text,
            reporter=reporter,
            settings=document.global_settings,
            profile=profile,
        )
    except CounterError as e:
        show_error(e, log_window)
        return
    line = reporter.lines[-1]
    dpg.set_value(result_text, line)
    dpg.set_value(log_window, dpg.get_value(log_window) + line + "\n")


def load_profile_literals(profile, target_input, text_input, log_window):
    try:
        document = load_config_document(profile_name=profile)
    except CounterError as e:
        show_error(e, log_window)
        return
    settings = document.profiles[profile]
    dpg.set_value(target_input, settings.target)
    dpg.set_value(text_input, settings.string)


def main():
    try:
        document = load_config_document()
    except CounterError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    profile_names = sorted(document.profiles)
    initial = document.profiles.get(DEFAULT_PROFILE) or document.profiles[profile_names[0]]

    dpg.create_context()
    dpg.create_viewport(title='charcount', width=560, height=360)

    TEXT = {
        "profile": "Profile:",
        "target": "Character to count (l, x6C or #108):",
        "string": "String to scan:",
        "run": "Result:",
    }

    with dpg.window(label="Character counter", width=540, height=340):
        dpg.add_text(TEXT["profile"])
        profile = dpg.add_combo(items=profile_names, default_value=DEFAULT_PROFILE, width=200)

        dpg.add_text(TEXT["target"])
        target_input = dpg.add_input_text(label="Target", width=120, default_value=initial.target)

        dpg.add_text(TEXT["string"])
        text_input = dpg.add_input_text(label="String", width=400, default_value=initial.string)

        dpg.add_button(label="Load profile literals", callback=lambda: load_profile_literals(
            dpg.get_value(profile), target_input, text_input, log_window
        ))

        dpg.add_separator()
        dpg.add_text(TEXT["run"])
        result_text = dpg.add_text("")
        log_window = dpg.add_input_text(label="Log", multiline=True, readonly=True, width=400, height=100,
                                        default_value="")
        dpg.add_button(label="Count", callback=lambda: run_scan(
            dpg.get_value(target_input),
            dpg.get_value(text_input),
            dpg.get_value(profile),
            result_text,
            log_window,
        ))

    dpg.setup_dearpygui()
    dpg.show_viewport()
    dpg.start_dearpygui()
    dpg.destroy_context()


if __name__ == "__main__":
    sys.exit(main())
