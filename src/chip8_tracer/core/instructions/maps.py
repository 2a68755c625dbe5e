"""
オペコードと命令実装のマッピング定義。
"""
from . import alu
from . import control
from . import display
from . import keypad
from . import load

# @intent:map 上位4ビット（ファミリ）からデコード関数へのマッピングテーブル。
# 2段目のディスパッチが必要なファミリ（0x0, 0x8, 0xE, 0xF）は SUB_DECODE_MAPS で扱う。
DECODE_MAP = {
    0x1: control.decode_jp,
    0x2: control.decode_call,
    0x3: control.decode_se_imm,
    0x4: control.decode_sne_imm,
    0x5: control.decode_se_reg,
    0x6: load.decode_ld_imm,
    0x7: alu.decode_add_imm,
    0x9: control.decode_sne_reg,
    0xA: load.decode_ld_i,
    0xB: control.decode_jp_v0,
    0xC: alu.decode_rnd,
    0xD: display.decode_drw,
}

# @intent:map ファミリごとの2段目のデコードテーブル。(サブコード抽出関数, サブコード→デコード関数)
SUB_DECODE_MAPS = {
    0x0: (lambda opcode: opcode, {
        0x00E0: display.decode_cls,
        0x00EE: control.decode_ret,
    }),
    0x8: (lambda opcode: opcode & 0x000F, {
        0x0: load.decode_ld_reg,
        0x1: alu.decode_or,
        0x2: alu.decode_and,
        0x3: alu.decode_xor,
        0x4: alu.decode_add_reg,
        0x5: alu.decode_sub,
        0x6: alu.decode_shr,
        0x7: alu.decode_subn,
        0xE: alu.decode_shl,
    }),
    0xE: (lambda opcode: opcode & 0x00FF, {
        0x9E: keypad.decode_skp,
        0xA1: keypad.decode_sknp,
    }),
    0xF: (lambda opcode: opcode & 0x00FF, {
        0x07: load.decode_ld_vx_dt,
        0x0A: keypad.decode_ld_vx_k,
        0x15: load.decode_ld_dt_vx,
        0x18: load.decode_ld_st_vx,
        0x1E: alu.decode_add_i,
        0x29: load.decode_ld_f,
        0x33: load.decode_ld_b,
        0x55: load.decode_ld_dump,
        0x65: load.decode_ld_load,
    }),
}

# @intent:map 命令キーから実行関数へのマッピングテーブル。
EXECUTE_MAP = {
    # Display
    "CLS": display.execute_cls,
    "DRW": display.execute_drw,

    # Control
    "RET": control.execute_ret,
    "JP": control.execute_jp,
    "CALL": control.execute_call,
    "SE_IMM": control.execute_se_imm,
    "SNE_IMM": control.execute_sne_imm,
    "SE_REG": control.execute_se_reg,
    "SNE_REG": control.execute_sne_reg,
    "JP_V0": control.execute_jp_v0,

    # Load/Store
    "LD_IMM": load.execute_ld_imm,
    "LD_REG": load.execute_ld_reg,
    "LD_I": load.execute_ld_i,
    "LD_VX_DT": load.execute_ld_vx_dt,
    "LD_DT_VX": load.execute_ld_dt_vx,
    "LD_ST_VX": load.execute_ld_st_vx,
    "LD_F": load.execute_ld_f,
    "LD_B": load.execute_ld_b,
    "LD_DUMP": load.execute_ld_dump,
    "LD_LOAD": load.execute_ld_load,

    # ALU
    "ADD_IMM": alu.execute_add_imm,
    "OR": alu.execute_or,
    "AND": alu.execute_and,
    "XOR": alu.execute_xor,
    "ADD_REG": alu.execute_add_reg,
    "SUB": alu.execute_sub,
    "SHR": alu.execute_shr,
    "SUBN": alu.execute_subn,
    "SHL": alu.execute_shl,
    "RND": alu.execute_rnd,
    "ADD_I": alu.execute_add_i,

    # Keypad
    "SKP": keypad.execute_skp,
    "SKNP": keypad.execute_sknp,
    "LD_VX_K": keypad.execute_ld_vx_k,
}
