# chip8_tracer/core/trace.py
"""
デバッグトレース

サイクルごとに実行した命令の要約を、上限付きのFIFOバッファに記録します。
エンジン自身はこの記録を参照せず、UIなど外部からの観測専用です。
"""
from collections import deque
from typing import Deque, Iterator, List

# @intent:constant トレースに保持する最大行数。
TRACE_CAPACITY = 51

# @intent:responsibility 直近の実行履歴を上限付きで保持します。
class DebugTrace:
    """
    最新 TRACE_CAPACITY 件のテキストを保持するリングバッファ。
    満杯のときは最も古い行を捨ててから追加します。
    """
    def __init__(self, enabled: bool = False, capacity: int = TRACE_CAPACITY):
        if capacity <= 0:
            raise ValueError("Trace capacity must be a positive integer.")
        self.enabled = enabled
        self._entries: Deque[str] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._entries.maxlen

    # @intent:responsibility 診断が有効な場合のみ1行追加します。
    def append(self, line: str) -> None:
        if self.enabled:
            self._entries.append(line)

    def clear(self) -> None:
        self._entries.clear()

    def entries(self) -> List[str]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))
