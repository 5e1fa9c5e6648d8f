# UI.py
""""PySide6 user interface for the Expression Tree Calculator.

Structure
---------
- Calculator UI: main window with input line, tree view, result display and buttons
- Settings UI: modal dialog for user preferences

Responsibilities (Calculator)
-----------------------------
- Build window, input line, tree view and buttons
- Dispatch the expression (or 'fib N') to the engines in a worker thread
- Render the tree and result, show engine errors as dialogs
- Clipboard integration: copy result, or the tree while Shift is held


Responsibilities (Settings)
---------------------------

- Load Current Settings and Settings Descriptions via Config_Manager
- Validate user input (e.g. minimum fib limit)
- Save and apply theme changes immediately


Threading Note
--------------
Evaluation is executed off the UI thread in Worker(QObject).
Results (or errors) are emitted via a Qt signal and handled back in the UI.
"""""

from PySide6 import QtWidgets, QtGui
from PySide6.QtCore import Qt, QObject, Signal
import sys
from pathlib import Path
import threading
from pynput.keyboard import Controller
import pyperclip
from . import error as E
from . import config_manager as config_manager
from . import TreeEngine as TreeEngine
from . import FibonacciEngine as FibonacciEngine

# Resolve project root depending on run mode (Script or .exe)
if getattr(sys, 'frozen', False):
    PROJECT_ROOT = Path(sys._MEIPASS)
else:
    PROJECT_ROOT = Path(__file__).resolve().parent.parent


def is_shift_pressed():
    """""

    Small and simple check, whether shift is pressed or not.
    Used by the copy button: Shift + copy puts the tree on the clipboard instead of the result.

    """""

    keyboard_controller = Controller()
    return keyboard_controller.shift_pressed


class Worker(QObject):
    """""

    Runs in a seperate thread, hands the problem to TreeEngine / FibonacciEngine
    and emits a Signal back to the Calculator UI when the calculation is done or failed.

    Signal payload: (result or MathError, problem, rendered tree or "")

    """""

    job_finished = Signal(object, str, str)

    def __init__(self, problem, fib_limit):
        super().__init__()
        self.data = problem
        self.fib_limit = fib_limit

    def run_Calc(self):

        try:
            if FibonacciEngine.is_fib_command(self.data):
                result = FibonacciEngine.run_command(self.data, self.fib_limit)
                self.job_finished.emit(result, self.data, "")
                return

            tree, result = TreeEngine.calculate(self.data)
            self.job_finished.emit(result, self.data, tree.render())

        except E.MathError as e:
            self.job_finished.emit(e, self.data, "")

        except Exception as e:
            critical_error = E.MathError(
                message=f"Unexpected crash: {e}",
                code="9999",
                equation=self.data
            )
            self.job_finished.emit(critical_error, self.data, "")


class SettingsDialog(QtWidgets.QDialog):
    """""

    Settings window. Every boolean setting becomes a checkbox,
    every integer setting an input field.

    """""

    settings_saved = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.widgets = {}

        self.setWindowTitle("Calculator Settings")
        self.setMinimumSize(320, 220)

        main_layout = QtWidgets.QVBoxLayout(self)

        self.setting_value_list = config_manager.load_setting_value("all")
        self.setting_description_list = config_manager.load_setting_description("all")

        for key_value, value in self.setting_value_list.items():
            description = self.setting_description_list.get(key_value, key_value)

            if isinstance(value, bool):
                checkbox = QtWidgets.QCheckBox(description)
                checkbox.setChecked(value)
                main_layout.addWidget(checkbox)
                self.widgets[key_value] = checkbox

            elif isinstance(value, int):
                row_h_layout = QtWidgets.QHBoxLayout()
                main_layout.addLayout(row_h_layout)
                label = QtWidgets.QLabel(description + " (min. 1):")
                input_field = QtWidgets.QLineEdit()
                input_field.setPlaceholderText(str(value))

                row_h_layout.addWidget(label)
                row_h_layout.addWidget(input_field)
                row_h_layout.setStretch(1, 1)
                self.widgets[key_value] = input_field

        button_box = QtWidgets.QDialogButtonBox(QtWidgets.QDialogButtonBox.Ok | QtWidgets.QDialogButtonBox.Cancel)
        main_layout.addWidget(button_box)
        main_layout.addStretch(1)

        button_box.accepted.connect(lambda: self.save_settings(self.setting_value_list))
        button_box.rejected.connect(self.reject)

        self.update_darkmode()

    def save_settings(self, setting_value_list):
        for key_value, widget in self.widgets.items():

            if isinstance(widget, QtWidgets.QCheckBox):
                setting_value_list[key_value] = widget.isChecked()

            elif isinstance(widget, QtWidgets.QLineEdit):
                new_value_str = widget.text().strip()

                # Blank keeps the old value
                if new_value_str == "":
                    continue

                try:
                    new_value_int = int(new_value_str)
                    if new_value_int < 1:
                        raise ValueError(f"'{new_value_int}' is too small. Minimum is 1.")
                except ValueError as e:
                    QtWidgets.QMessageBox.critical(self, "Invalid Input:",
                                                   f"Error in input for '{key_value}':\n\n{e}\n\nPlease correct your input.")
                    return  # Stop saving!

                setting_value_list[key_value] = new_value_int

        saved_settings = config_manager.save_setting(setting_value_list)

        if saved_settings != {}:
            self.settings_saved.emit()
            self.accept()
            self.update_darkmode()
        else:
            QtWidgets.QMessageBox.critical(self, "Error",
                                           f"Error 4501: {E.ERROR_MESSAGES['4501']}{config_manager.config_json}")

    def update_darkmode(self):
        if self.setting_value_list["darkmode"] == True:
            self.setStyleSheet("""
                        QDialog {background-color: #121212;}
                        QLabel {color: white;}
                        QCheckBox {color: white;}
                        QLineEdit {background-color: #444444;color: white;border: 1px solid #666666;}
                        QDialogButtonBox QPushButton {background-color: #666666;color: white;}""")
        else:
            self.setStyleSheet("")


class CalculatorWindow(QtWidgets.QWidget):

    def __init__(self):
        super().__init__()

        # --- 1. Load Settings ---
        self.setting_value_list = config_manager.load_setting_value("all")

        # --- 2. Instance State Variables ---
        self.calculator_result = ""  # Last result as shown
        self.tree_text = ""  # Last rendered tree
        self.thread_active = False
        self.button_objects = {}

        # --- 3. Window Setup ---
        icon_path = PROJECT_ROOT / "icons" / "icon.png"
        if icon_path.exists():
            self.setWindowIcon(QtGui.QIcon(str(icon_path)))
        self.setWindowTitle("Expression Tree Calculator")
        self.resize(420, 520)
        main_v_layout = QtWidgets.QVBoxLayout(self)

        # --- 4. Input Line ---
        self.input_line = QtWidgets.QLineEdit()
        self.input_line.setPlaceholderText("1 + 2 * 3   or   fib 10")
        self.input_line.returnPressed.connect(self.start_calculation)
        main_v_layout.addWidget(self.input_line)

        # --- 5. Tree View (monospace, the ASCII art relies on it) ---
        self.tree_view = QtWidgets.QPlainTextEdit()
        self.tree_view.setReadOnly(True)
        self.tree_view.setFont(QtGui.QFontDatabase.systemFont(QtGui.QFontDatabase.SystemFont.FixedFont))
        main_v_layout.addWidget(self.tree_view, 1)

        # --- 6. Result Display ---
        self.display = QtWidgets.QLineEdit("")
        self.display.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.display.setReadOnly(True)
        font = self.display.font()
        font.setPointSize(20)
        self.display.setFont(font)
        main_v_layout.addWidget(self.display)

        # --- 7. Buttons ---
        button_row = QtWidgets.QHBoxLayout()
        main_v_layout.addLayout(button_row)
        self.buttons = ['⚙️', '📋', 'C', '⏎']

        for text in self.buttons:
            button = QtWidgets.QPushButton(text)
            button.clicked.connect(lambda checked=False, val=text: self.handle_button_press(val))
            button_row.addWidget(button)
            self.button_objects[text] = button

        self.update_darkmode()

    def handle_button_press(self, value):
        if value == '⚙️':
            self.open_settings()

        elif value == '📋':
            # Shift held -> copy the tree, otherwise the result
            if is_shift_pressed():
                pyperclip.copy(self.tree_text)
            else:
                pyperclip.copy(self.calculator_result)

        elif value == 'C':
            self.input_line.clear()
            self.tree_view.clear()
            self.display.clear()
            self.calculator_result = ""
            self.tree_text = ""

        elif value == '⏎':
            self.start_calculation()

    def start_calculation(self):
        if self.thread_active:
            QtWidgets.QMessageBox.warning(self, "Busy", f"Error 4002: {E.ERROR_MESSAGES['4002']}")
            return

        problem = self.input_line.text().strip()
        self.thread_active = True
        self.update_return_button()
        self.display.setText("...")
        QtWidgets.QApplication.processEvents()

        worker_instance = Worker(problem, self.setting_value_list["fib_limit"])
        worker_instance.job_finished.connect(self.Calc_result)
        self.worker_instance = worker_instance  # Keep the QObject alive until the signal arrives
        my_thread = threading.Thread(target=worker_instance.run_Calc)
        my_thread.start()

    def update_return_button(self):
        return_button = self.button_objects.get('⏎')
        if not return_button:
            return

        if self.thread_active == True:
            return_button.setStyleSheet("background-color: #FF0000; color: white; font-weight: bold;")
            return_button.setText("X")
        else:
            return_button.setStyleSheet("background-color: #007bff; color: white; font-weight: bold;")
            return_button.setText('⏎')
        return_button.update()

    def update_darkmode(self):
        if self.setting_value_list["darkmode"] == True:
            for text, button in self.button_objects.items():
                if text != '⏎':
                    button.setStyleSheet("background-color: #121212; color: white; font-weight: bold;")
            self.setStyleSheet("background-color: #121212;")
            self.input_line.setStyleSheet("background-color: #1e1e1e; color: white;")
            self.tree_view.setStyleSheet("background-color: #1e1e1e; color: white;")
            self.display.setStyleSheet("background-color: #121212; color: white; font-weight: bold;")
        else:
            for text, button in self.button_objects.items():
                if text != '⏎':
                    button.setStyleSheet("font-weight: normal;")
            self.setStyleSheet("")
            self.input_line.setStyleSheet("")
            self.tree_view.setStyleSheet("")
            self.display.setStyleSheet("font-weight: bold;")
        # Re-apply the "Enter" button style (blue or red)
        self.update_return_button()

    def open_settings(self):
        settings_dialog = SettingsDialog(self)
        settings_dialog.exec()

        # Reload so changes (like darkmode) are applied
        self.setting_value_list = config_manager.load_setting_value("all")
        TreeEngine.debug = self.setting_value_list["debug"]
        self.update_darkmode()

    def get_message_box_stylesheet(self):
        if self.setting_value_list["darkmode"] == True:
            return """
                QMessageBox { background-color: #121212; color: white; }
                QLabel { color: white; }
                QPushButton { background-color: #2e2e2e; color: white; border: 1px solid #444444; padding: 5px 15px; }
            """
        return ""

    def Calc_result(self, result, equation, tree_text):
        self.thread_active = False
        self.update_return_button()

        if isinstance(result, E.MathError):
            error_obj = result
            error_box = QtWidgets.QMessageBox(self)
            error_code = error_obj.code
            additional_info = f"Details: {error_obj.message}\nEquation: {error_obj.equation}"

            error_box.setIcon(QtWidgets.QMessageBox.Critical)
            error_box.setWindowTitle("Calculation error")
            error_box.setText(f"Error {error_code}: {E.ERROR_MESSAGES.get(error_code, 'Unknown error')}")
            error_box.setInformativeText(additional_info)
            error_box.setStandardButtons(QtWidgets.QMessageBox.Ok)
            error_box.setStyleSheet(self.get_message_box_stylesheet())
            error_box.exec()
            self.display.setText("")
            self.tree_view.clear()
            return

        self.calculator_result = str(result)
        self.tree_text = tree_text

        if self.setting_value_list["show_tree"] == True:
            self.tree_view.setPlainText(tree_text)
        else:
            self.tree_view.clear()

        if FibonacciEngine.is_fib_command(equation):
            self.display.setText(self.calculator_result)
        else:
            self.display.setText(f"= {self.calculator_result}")

        if self.setting_value_list["copy_result"] == True:
            pyperclip.copy(self.calculator_result)


def main():
    app = QtWidgets.QApplication()
    window = CalculatorWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
