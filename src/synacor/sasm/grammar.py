# type: ignore
''' Assembly grammar '''

import pyparsing as pp

from synacor.common.ops import MNEMONICS, OPERANDS
from synacor.common.hwconf import REGISTER_BASE
from synacor.sasm.fpp import FPP


comment = pp.Suppress(pp.Literal('//') + pp.rest_of_line)

id = pp.Word(pp.alphas + '_', pp.alphanums + '_')

label = (id + pp.Suppress(':')).set_parse_action(lambda r: (FPP.on_label, r[0]))

reg_op = pp.Regex(r'r[0-7]\b').set_parse_action(
    lambda r: (FPP.on_word, REGISTER_BASE + int(r[0][1]))
)

hex_const = pp.Regex('0x[0-9a-fA-F]+').set_parse_action(lambda r: (FPP.on_word, int(r[0], 16)))
dec_const = pp.Regex('[0-9]+').set_parse_action(lambda r: (FPP.on_word, int(r[0])))
char_const = pp.QuotedString("'", esc_char='\\').set_parse_action(
    lambda r: (FPP.on_char, r[0])
)

ref = (pp.Suppress('&') + id).set_parse_action(lambda r: (FPP.on_ref, r[0]))

operand = reg_op ^ hex_const ^ dec_const ^ char_const ^ ref


def g_cmd(mnemonic, op):
    cmd = pp.Keyword(mnemonic).set_parse_action(lambda _: (FPP.issue_op, op))
    count = OPERANDS[op]

    if count == 0:
        return cmd

    return cmd + operand * count


asm_cmd = pp.MatchFirst([g_cmd(m, op) for m, op in MNEMONICS.items()])

# Directives
data_dir = pp.Suppress(pp.Keyword('.data', ident_chars=pp.alphanums)) + pp.OneOrMore(operand)
str_dir = pp.Suppress(pp.Keyword('.str', ident_chars=pp.alphanums)) \
    + pp.QuotedString('"', esc_char='\\').set_parse_action(lambda r: (FPP.on_string, r[0]))

statement = label | asm_cmd | data_dir | str_dir

program = pp.ZeroOrMore(statement) + pp.StringEnd()
program.ignore(comment)
