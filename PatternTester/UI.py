# UI.py
""""PySide6 user interface for the Expression Pattern Tester.

Structure
---------
- Tester UI: main window with input field, check selector and result area
- Settings UI: modal dialog for user preferences

Responsibilities (Tester)
-------------------------
- Collect the expression and the selected check (PatternEngine.PATTERN_KEYS)
- Dispatch the check to PatternEngine in a worker thread
- Render the three result states (no result yet / true / false)
- Show PatternEngine errors as dialogs
- Clipboard integration: paste input, optional test after paste, Shift + Test copies the result


Responsibilities (Settings)
---------------------------

- Load Current Settings and Settings Descriptions via config_manager
- Save and apply theme changes immediately


Threading Note
--------------
Checks run off the UI thread in Worker(QObject), so the window stays responsive.
Results (or errors) are emitted via a Qt signal and handled back in the UI.
"""""

# UI.py
from PySide6 import QtWidgets
from PySide6.QtCore import QObject, Signal
import sys
import threading
from pynput.keyboard import Controller
import pyperclip
from . import error as E  # Imports error.py as a module
from . import config_manager as config_manager  # Imports config_manager.py as a module
from . import PatternEngine as PatternEngine  # Imports PatternEngine.py as a module


NO_RESULT_TEXT = "Enter a value and press Test."


def is_shift_pressed():
    """""

    Small and simple check, whether shift is pressed or not.
    Used for the "shift to copy" setting.

    """""

    keyboard_controller = Controller()
    return keyboard_controller.shift_pressed


def result_text(result):
    if result is None:
        return NO_RESULT_TEXT
    elif result:
        return "Result: true ✅"
    else:
        return "Result: false ❌"


class Worker(QObject):
    """""

    Runs one check in a separate thread and emits a Signal when it is done / failed
    back to the Tester UI for processing.

    """""

    job_finished = Signal(object, str, str)

    def __init__(self, key, problem):
        super().__init__()
        self.key = key
        self.data = problem

    def run_check(self):

        try:
            result = PatternEngine.run_pattern(self.key, self.data)
            self.job_finished.emit(result, self.key, self.data)

        except E.MathError as e:
            # Known, handled error (e.g. unknown pattern key)
            self.job_finished.emit(e, self.key, self.data)

        except Exception as e:
            # Unexpected crash we didn't plan for
            critical_error = E.MathError(
                message=f"Unexpected crash: {e}",
                code="9999",
                equation=self.data
            )
            self.job_finished.emit(critical_error, self.key, self.data)


class SettingsDialog(QtWidgets.QDialog):
    """""

    Settings window. Bool settings become checkboxes, 'default_pattern'
    becomes a selector over the pattern keys. Descriptions come from ui_strings.json.

    """""

    settings_saved = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.widgets = {}

        # --- 1. Window Setup ---
        self.setWindowTitle("Pattern Tester Settings")
        self.setMinimumSize(300, 200)

        main_layout = QtWidgets.QVBoxLayout(self)

        # --- 2. Load Settings ---
        self.setting_value_list = config_manager.load_settings()

        # --- 3. Build Widgets ---
        for key_value, value in self.setting_value_list.items():
            description = config_manager.load_setting_description(key_value)

            if isinstance(value, bool):
                checkbox = QtWidgets.QCheckBox(description)
                checkbox.setChecked(value)
                main_layout.addWidget(checkbox)
                self.widgets[key_value] = checkbox

            elif key_value == "default_pattern":
                row_h_layout = QtWidgets.QHBoxLayout()
                main_layout.addLayout(row_h_layout)
                selector = QtWidgets.QComboBox()
                selector.addItems(PatternEngine.PATTERN_KEYS)
                if value in PatternEngine.PATTERN_KEYS:
                    selector.setCurrentText(value)
                row_h_layout.addWidget(QtWidgets.QLabel(description + ":"))
                row_h_layout.addWidget(selector)
                row_h_layout.setStretch(1, 1)
                self.widgets[key_value] = selector

        # --- 4. OK / Cancel Buttons ---
        button_box = QtWidgets.QDialogButtonBox(QtWidgets.QDialogButtonBox.Ok | QtWidgets.QDialogButtonBox.Cancel)
        main_layout.addWidget(button_box)
        main_layout.addStretch(1)

        button_box.accepted.connect(self.save_settings)
        button_box.rejected.connect(self.reject)

        self.update_darkmode()

    def save_settings(self):
        for key_value, widget in self.widgets.items():
            if isinstance(widget, QtWidgets.QCheckBox):
                self.setting_value_list[key_value] = widget.isChecked()
            elif isinstance(widget, QtWidgets.QComboBox):
                self.setting_value_list[key_value] = widget.currentText()

        try:
            config_manager.save_setting(self.setting_value_list)
        except E.ConfigError as e:
            QtWidgets.QMessageBox.critical(self, "Error",
                                           f"Error {e.code}: {E.ERROR_MESSAGES.get(e.code, 'Unknown error')}{e.message}")
            return

        self.settings_saved.emit()
        self.accept()
        self.update_darkmode()

    def update_darkmode(self):
        if self.setting_value_list["darkmode"] == True:
            self.setStyleSheet("""
                        QDialog {background-color: #121212;}
                        QLabel {color: white;}
                        QCheckBox {color: white;}
                        QComboBox {background-color: #444444;color: white;border: 1px solid #666666;}
                        QDialogButtonBox QPushButton {background-color: #666666;color: white;}""")
        else:
            self.setStyleSheet("")


class PatternTester(QtWidgets.QWidget):

    def __init__(self):
        super().__init__()

        # --- 1. Load Settings ---
        self.setting_value_list = config_manager.load_settings()

        # --- 2. Instance State Variables ---
        self.thread_active = False
        self.last_result = None
        self.copy_requested = False

        # --- 3. Window Setup ---
        self.setWindowTitle("Pattern tester")
        self.resize(380, 260)
        main_v_layout = QtWidgets.QVBoxLayout(self)

        header = QtWidgets.QLabel("Enter an expression (e.g. 8, 2x + 1 or x*x) and choose a check.")
        header.setWordWrap(True)
        main_v_layout.addWidget(header)

        # --- 4. Input Row ---
        input_row = QtWidgets.QHBoxLayout()
        self.input_field = QtWidgets.QLineEdit()
        self.input_field.setPlaceholderText("e.g. 8 or 1e3")
        self.input_field.textChanged.connect(self.update_test_button)
        self.input_field.returnPressed.connect(self.start_check)
        self.paste_button = QtWidgets.QPushButton("Paste")
        self.paste_button.clicked.connect(self.paste_input)
        input_row.addWidget(self.input_field, 1)
        input_row.addWidget(self.paste_button)
        main_v_layout.addLayout(input_row)

        # --- 5. Check Selector ---
        self.selector = QtWidgets.QComboBox()
        self.selector.addItems(PatternEngine.PATTERN_KEYS)
        if self.setting_value_list["default_pattern"] in PatternEngine.PATTERN_KEYS:
            self.selector.setCurrentText(self.setting_value_list["default_pattern"])
        main_v_layout.addWidget(self.selector)

        # --- 6. Buttons ---
        button_row = QtWidgets.QHBoxLayout()
        self.test_button = QtWidgets.QPushButton("Test")
        self.test_button.clicked.connect(self.start_check)
        self.clear_button = QtWidgets.QPushButton("Clear")
        self.clear_button.clicked.connect(self.clear)
        self.settings_button = QtWidgets.QPushButton("⚙")
        self.settings_button.clicked.connect(self.open_settings)
        button_row.addWidget(self.test_button, 1)
        button_row.addWidget(self.clear_button)
        button_row.addWidget(self.settings_button)
        main_v_layout.addLayout(button_row)

        # --- 7. Result Area ---
        self.result_label = QtWidgets.QLabel(NO_RESULT_TEXT)
        main_v_layout.addWidget(self.result_label)
        main_v_layout.addStretch(1)

        self.update_test_button()
        self.update_darkmode()

    def update_test_button(self):
        self.test_button.setEnabled(self.input_field.text().strip() != "" and not self.thread_active)

    def show_result(self, result):
        self.last_result = result
        self.result_label.setText(result_text(result))
        if result is None:
            self.result_label.setStyleSheet("")
        elif result:
            self.result_label.setStyleSheet("color: #15803d; font-weight: bold;")
        else:
            self.result_label.setStyleSheet("color: #dc2626; font-weight: bold;")

    def clear(self):
        self.input_field.setText("")
        self.show_result(None)

    def paste_input(self):
        clipboard_text = pyperclip.paste()
        if not clipboard_text:
            return
        self.input_field.setText(clipboard_text.strip())

        # Optional test right after paste (configurable)
        if self.setting_value_list["after_paste_test"] == True:
            self.start_check()

    def start_check(self):
        problem = self.input_field.text()
        if problem.strip() == "":
            return

        if self.thread_active:
            self.show_error(E.MathError("A check is already running!", code="4002", equation=problem))
            return

        self.copy_requested = self.setting_value_list["shift_to_copy"] == True and is_shift_pressed()
        self.thread_active = True
        self.update_test_button()
        self.result_label.setText("...")

        # --- Start Thread ---
        worker_instance = Worker(self.selector.currentText(), problem)
        worker_instance.job_finished.connect(self.check_result)
        my_thread = threading.Thread(target=worker_instance.run_check)
        my_thread.start()

    def check_result(self, result, key, problem):
        self.thread_active = False
        self.update_test_button()

        if isinstance(result, E.MathError):
            self.show_result(None)
            self.show_error(result)
            return

        self.show_result(result)
        if self.copy_requested:
            pyperclip.copy(f"{key}({problem}) = {str(result).lower()}")

    def show_error(self, error_obj):
        error_box = QtWidgets.QMessageBox(self)
        error_box.setIcon(QtWidgets.QMessageBox.Critical)
        error_box.setWindowTitle("Pattern error")
        error_box.setText(f"Error {error_obj.code}: {E.ERROR_MESSAGES.get(error_obj.code, 'Unknown error')}")
        error_box.setInformativeText(f"Details: {error_obj.message}\nExpression: {error_obj.equation}")
        error_box.setStandardButtons(QtWidgets.QMessageBox.Ok)
        error_box.setStyleSheet(self.get_message_box_stylesheet())
        error_box.exec()

    def update_darkmode(self):
        if self.setting_value_list["darkmode"] == True:
            self.setStyleSheet("""
                        QWidget {background-color: #121212; color: white;}
                        QLineEdit, QComboBox {background-color: #444444; color: white; border: 1px solid #666666;}
                        QPushButton {background-color: #2e2e2e; color: white;}""")
        else:
            self.setStyleSheet("")
        self.show_result(self.last_result)

    def open_settings(self):
        settings_dialog = SettingsDialog(self)
        settings_dialog.exec()  # modal

        # Reload settings after dialog closes
        self.setting_value_list = config_manager.load_settings()
        self.update_darkmode()

    def get_message_box_stylesheet(self):
        if self.setting_value_list["darkmode"] == True:
            return """
                QMessageBox {
                    background-color: #121212;
                    color: white;
                }
                QLabel {
                    color: white;
                }
                QPushButton {
                    background-color: #2e2e2e;
                    color: white;
                    border: 1px solid #444444;
                    padding: 5px 15px;
                }
            """
        else:
            return ""


def main():
    # --- Main Application Entry Point ---
    app = QtWidgets.QApplication()
    window = PatternTester()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
