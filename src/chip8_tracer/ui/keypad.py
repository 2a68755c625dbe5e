"""
キーパッド入力の変換モジュール。

ホストのキー入力（文字）をCHIP-8の16キーのスナップショットへ変換します。
Qtに依存しないため、UIを起動せずにテストできます。
"""
from typing import Dict, List, Optional

from chip8_tracer.common.errors import QuitRequested
from chip8_tracer.common.types import KEYPAD_SIZE, KeypadSnapshot
from chip8_tracer.config.models import DEFAULT_KEYMAP

# @intent:responsibility ホストのキーイベントからキーパッドの状態を保持します。
class KeypadMapper:
    """
    一度に押下状態になるキーは1つだけです（新しいキーが押されると他のキーはクリアされます）。
    マップされていないキーは無視され、終了キーは QuitRequested を送出します。
    """
    def __init__(self, keymap: Optional[Dict[str, int]] = None, quit_key: str = "p"):
        self._keymap = {k.lower(): v for k, v in (keymap or DEFAULT_KEYMAP).items()}
        self._quit_key = quit_key.lower()
        self._state: List[bool] = [False] * KEYPAD_SIZE

    # @intent:responsibility キー押下を反映します。キーパッドが変化した場合にTrueを返します。
    def press(self, key: str) -> bool:
        key = key.lower()
        if key == self._quit_key:
            raise QuitRequested(key)
        index = self._keymap.get(key)
        if index is None:
            return False
        self._state = [False] * KEYPAD_SIZE
        self._state[index] = True
        return True

    def release(self, key: str) -> bool:
        index = self._keymap.get(key.lower())
        if index is None or not self._state[index]:
            return False
        self._state[index] = False
        return True

    def clear(self) -> None:
        self._state = [False] * KEYPAD_SIZE

    def pressed_keys(self) -> List[int]:
        return [index for index, pressed in enumerate(self._state) if pressed]

    def snapshot(self) -> KeypadSnapshot:
        return tuple(self._state)
