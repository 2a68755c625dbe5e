# src/chip8_tracer/ui/register_view.py
"""
CHIP-8のレジスタとコールスタックを表示するウィジェット。

V0-VF・I・PCは16進、タイマー（残りティック数）とスタック深さは10進で表示します。
コールスタックは最も新しいフレームを先頭に、CALL命令のアドレスと戻り先を並べます。
"""
from typing import Dict, List, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QFontDatabase
from PySide6.QtWidgets import QWidget, QVBoxLayout, QGridLayout, QGroupBox, QLabel, QListWidget

from chip8_tracer.core.cpu import Chip8Cpu

# @intent:constant 10進で表示するレジスタ。
DECIMAL_REGISTERS = ("DT", "ST", "SP")

# 1行に並べるレジスタ数（V0-VFは4x4になる）
GRID_COLUMNS = 4

# @intent:utility_function レジスタ値を表示用に整形します。
def format_register(name: str, width: int, value: int) -> str:
    if name in DECIMAL_REGISTERS:
        return str(value)
    return f"0x{value:0{(width + 3) // 4}X}"

# @intent:utility_function コールスタックの1フレームを整形します。
def format_stack_entry(depth: int, call_address: int) -> str:
    # RETはCALL命令自身のアドレスの次へ戻る
    return f"#{depth}: CALL at 0x{call_address:03X} -> ret 0x{call_address + 2:03X}"

# @intent:responsibility インタプリタのレジスタとコールスタックを表示します。
class RegisterView(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        self._cpu: Optional[Chip8Cpu] = None
        self._font = QFontDatabase.systemFont(QFontDatabase.FixedFont)
        self._values: Dict[str, QLabel] = {}
        self._widths: Dict[str, int] = {}
        self._group_boxes: List[QGroupBox] = []

        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(5, 5, 5, 5)

        self.stack_list = QListWidget()
        self.stack_list.setFont(self._font)
        stack_box = QGroupBox("Call Stack")
        QVBoxLayout(stack_box).addWidget(self.stack_list)
        self._layout.addWidget(stack_box)

    def set_cpu(self, cpu: Chip8Cpu) -> None:
        self._cpu = cpu
        self._build_register_groups()
        self.update_registers()

    # @intent:responsibility レジスタレイアウトの各グループをグリッドとして、スタック表示の上に配置します。
    def _build_register_groups(self) -> None:
        for box in self._group_boxes:
            self._layout.removeWidget(box)
            box.deleteLater()
        self._group_boxes = []
        self._values.clear()
        self._widths.clear()

        for position, group in enumerate(self._cpu.get_register_layout()):
            box = QGroupBox(group.group_name)
            grid = QGridLayout(box)
            grid.setSpacing(3)
            for n, info in enumerate(group.registers):
                row, column = divmod(n, GRID_COLUMNS)
                value_label = QLabel()
                value_label.setFont(self._font)
                value_label.setAlignment(Qt.AlignRight)
                grid.addWidget(QLabel(info.name), row, column * 2)
                grid.addWidget(value_label, row, column * 2 + 1)
                self._values[info.name] = value_label
                self._widths[info.name] = info.width
            self._layout.insertWidget(position, box)
            self._group_boxes.append(box)

    # @intent:responsibility 現在の状態でレジスタ値とコールスタックの表示を更新します。
    def update_registers(self) -> None:
        if self._cpu is None:
            return
        for name, value in self._cpu.get_register_map().items():
            label = self._values.get(name)
            if label is not None:
                label.setText(format_register(name, self._widths[name], value))

        stack = self._cpu.get_state().stack
        self.stack_list.clear()
        for depth in range(len(stack) - 1, -1, -1):
            self.stack_list.addItem(format_stack_entry(depth, stack[depth]))

    def register_text(self, name: str) -> str:
        return self._values[name].text()

    def stack_entries(self) -> List[str]:
        return [self.stack_list.item(row).text() for row in range(self.stack_list.count())]
