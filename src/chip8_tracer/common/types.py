"""
共通の型定義を提供するモジュール。
プロジェクト全体で使用される汎用的な型エイリアスや定数を定義します。
"""
from typing import List, NamedTuple, Sequence, Tuple

# @intent:constant CHIP-8の16キーのキーパッド（0x0-0xF）。
KEYPAD_SIZE = 16

# @intent:data_structure 1サイクル分のキーパッド入力（16個の真偽値）。
# ホストから渡され、コアは保持も変更もしません。
Keypad = Sequence[bool]

# @intent:data_structure コアへ渡す前に正規化された不変のキーパッドスナップショット。
KeypadSnapshot = Tuple[bool, ...]

NO_KEYS_PRESSED: KeypadSnapshot = (False,) * KEYPAD_SIZE

# @intent:data_structure 単一のレジスタの表示定義。UIが動的にフィールドを生成するために使用される。
class RegisterInfo(NamedTuple):
    name: str
    width: int  # ビット幅 (8 or 16)

# @intent:data_structure レジスタグループの表示定義。関連するレジスタ（例: "General", "Index"）をまとめる。
class RegisterLayoutInfo(NamedTuple):
    group_name: str
    registers: List[RegisterInfo]


# @intent:utility_function ホストから受け取ったキーパッド入力を検証し、不変のタプルに変換します。
def normalize_keypad(keypad: Keypad) -> KeypadSnapshot:
    if len(keypad) != KEYPAD_SIZE:
        raise ValueError(f"Keypad snapshot must have {KEYPAD_SIZE} entries, got {len(keypad)}.")
    return tuple(bool(key) for key in keypad)
