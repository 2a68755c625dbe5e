"""
エミュレーション中に発生するエラーの定義。

コアエンジンは失敗をリトライせず、全てを呼び出し元へ例外として伝播させます。
"""


# @intent:responsibility 全てのエミュレーションエラーの基底クラスです。
class EmulationError(Exception):
    """
    CHIP-8インタプリタが呼び出し元へ返す型付きの失敗。
    ホスト側はこの型で捕捉し、実行を停止するか報告するかを判断します。
    """


# @intent:responsibility 未知のオペコード（またはFX29の範囲外の数字）を表します。
class UnknownOpcodeError(EmulationError):
    def __init__(self, opcode: int):
        self.opcode = opcode
        super().__init__(f"Unknown opcode 0x{opcode:04X}")


# @intent:responsibility 空のコールスタックからのRETを表します。
class StackUnderflowError(EmulationError):
    def __init__(self, pc: int):
        self.pc = pc
        super().__init__(f"Return with empty call stack at PC 0x{pc:04X}")


# @intent:responsibility 0-4095の範囲外へのメモリアクセスを表します。
class AddressOutOfRangeError(EmulationError):
    def __init__(self, address: int, size: int = 4096):
        self.address = address
        self.size = size
        super().__init__(f"Address 0x{address:04X} out of range for memory of size {size}")


# @intent:responsibility キーパッドに存在しないキー番号（0x10以上）の参照を表します。
class InvalidKeyError(EmulationError):
    def __init__(self, key: int, opcode: int):
        self.key = key
        self.opcode = opcode
        super().__init__(f"Key index 0x{key:02X} out of range 0x0-0xF in opcode 0x{opcode:04X}")


# @intent:responsibility 終了キーが押されたことをホストループへ通知します。
# @intent:rationale エンジン状態の破損ではなく、入力層からの中断シグナルとして扱います。
class QuitRequested(EmulationError):
    def __init__(self, key: str = ""):
        self.key = key
        super().__init__(f"Quit requested by key '{key}'")
