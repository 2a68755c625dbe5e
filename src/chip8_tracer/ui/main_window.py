# src/chip8_tracer/ui/main_window.py
"""
メインウィンドウの実装。
画面・レジスタ・トレースの各ビューを保持し、QTimerで命令サイクルを駆動します。
"""
import logging

from PySide6.QtCore import Qt, QTimer, Slot
from PySide6.QtGui import QAction, QCloseEvent, QKeyEvent
from PySide6.QtWidgets import QMainWindow, QDockWidget, QTabWidget, QToolBar, QFileDialog, QMessageBox

from chip8_tracer.common.errors import EmulationError, QuitRequested
from chip8_tracer.config.models import EmulatorConfig
from chip8_tracer.core.cpu import Chip8Cpu
from chip8_tracer.loader.loader import RomLoader
from .keypad import KeypadMapper
from .register_view import RegisterView
from .screen_view import ScreenView
from .trace_view import TraceView

logger = logging.getLogger(__name__)

# @intent:responsibility アプリケーションのメインウィンドウを定義し、ホストループを提供します。
class MainWindow(QMainWindow):
    """
    CHIP-8インタプリタのホスト。
    タイマーの1ティックごとに現在のキーパッド状態で cycle() を1回呼び出します。
    """
    def __init__(self, cpu: Chip8Cpu, config: EmulatorConfig, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Chip8 Tracer")

        self.cpu = cpu
        self.config = config
        self.keypad = KeypadMapper(config.keymap, config.quit_key)
        self.last_error = None

        self._timer = QTimer(self)
        self._timer.setInterval(config.cycle_interval_ms)
        self._timer.timeout.connect(self._on_tick)

        self.screen_view = ScreenView(scale=config.display_scale)
        self.setCentralWidget(self.screen_view)
        self.setFocusPolicy(Qt.StrongFocus)

        self._create_toolbar()
        self._create_status_inspector()
        self._create_menus()

        self._refresh_views()
        self._update_ui_state(False)

    def _create_menus(self):
        file_menu = self.menuBar().addMenu("File")

        self.load_rom_action = QAction("Load ROM...", self)
        self.load_rom_action.setShortcut("Ctrl+O")
        self.load_rom_action.triggered.connect(self._load_rom_file)
        file_menu.addAction(self.load_rom_action)

    # @intent:responsibility 実行制御用のツールバーを作成します。
    def _create_toolbar(self):
        toolbar = QToolBar("Main Toolbar")
        self.addToolBar(toolbar)

        self.run_action = QAction("Run", self)
        self.run_action.triggered.connect(self.start)
        toolbar.addAction(self.run_action)

        self.stop_action = QAction("Stop", self)
        self.stop_action.triggered.connect(self.stop)
        toolbar.addAction(self.stop_action)

        self.step_action = QAction("Step", self)
        self.step_action.triggered.connect(self._on_tick)
        toolbar.addAction(self.step_action)

        self.reset_action = QAction("Reset", self)
        self.reset_action.triggered.connect(self._reset)
        toolbar.addAction(self.reset_action)

    def _create_status_inspector(self):
        status_dock = QDockWidget("Status Inspector", self)
        status_dock.setAllowedAreas(Qt.RightDockWidgetArea)
        tab_widget = QTabWidget()
        self.register_view = RegisterView()
        self.register_view.set_cpu(self.cpu)
        tab_widget.addTab(self.register_view, "Registers")
        self.trace_view = TraceView()
        tab_widget.addTab(self.trace_view, "Trace")
        status_dock.setWidget(tab_widget)
        self.addDockWidget(Qt.RightDockWidgetArea, status_dock)

    # @intent:responsibility 実行状態に応じてアクションを切り替えます。停止エラー後はResetかROMロードまで実行できません。
    def _update_ui_state(self, is_running: bool):
        can_execute = not is_running and self.last_error is None
        self.load_rom_action.setEnabled(not is_running)
        self.run_action.setEnabled(can_execute)
        self.step_action.setEnabled(can_execute)
        self.reset_action.setEnabled(not is_running)
        self.stop_action.setEnabled(is_running)

    def _refresh_views(self):
        self.screen_view.update_framebuffer(self.cpu.framebuffer)
        self.register_view.update_registers()
        self.trace_view.update_trace(self.cpu.trace)

    @Slot()
    def start(self):
        if self.last_error is not None:
            return
        self._update_ui_state(True)
        self._timer.start()

    @Slot()
    def stop(self):
        self._timer.stop()
        self._update_ui_state(False)

    def is_running(self) -> bool:
        return self._timer.isActive()

    # @intent:responsibility 1サイクル実行し、表示を更新します。失敗時は実行を停止して報告します。
    @Slot()
    def _on_tick(self):
        try:
            self.cpu.cycle(self.keypad.snapshot())
        except EmulationError as e:
            self.last_error = e
            self.stop()
            logger.error("Emulation halted at PC 0x%04X: %s", self.cpu.get_state().pc, e)
            self.statusBar().showMessage(f"Halted: {e}")
            QMessageBox.critical(self, "Emulation Error", str(e))
        self._refresh_views()

    def _clear_error(self):
        self.last_error = None
        self.statusBar().clearMessage()
        self._update_ui_state(False)

    @Slot()
    def _reset(self):
        self.cpu.reset()
        self._clear_error()
        self._refresh_views()

    @Slot()
    def _load_rom_file(self):
        file_name, _ = QFileDialog.getOpenFileName(self, "Open CHIP-8 ROM", "", "CHIP-8 ROMs (*.ch8 *.c8);;All Files (*)")
        if file_name:
            try:
                self.cpu.reset()
                RomLoader().load_rom(file_name, self.cpu)
                self._clear_error()
                self._refresh_views()
            except (OSError, ValueError, EmulationError) as e:
                QMessageBox.critical(self, "Error", f"Failed to load ROM: {e}")

    def keyPressEvent(self, event: QKeyEvent):
        if event.isAutoRepeat() or not event.text():
            super().keyPressEvent(event)
            return
        try:
            self.keypad.press(event.text())
        except QuitRequested:
            self.close()

    def keyReleaseEvent(self, event: QKeyEvent):
        if event.isAutoRepeat() or not event.text():
            super().keyReleaseEvent(event)
            return
        self.keypad.release(event.text())

    def closeEvent(self, event: QCloseEvent):
        self._timer.stop()
        event.accept()
