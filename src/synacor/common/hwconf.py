
MEMORY_SIZE     = 0x10000       # 16-bit address space, in words
WORD_SIZE       = 2             # bytes per word in a program image
WORD_MASK       = 0xFFFF

MOD             = 0x8000        # all math is modulo 32768
LITERAL_MASK    = MOD - 1       # 15 significant bits
REGISTERS       = 8
REGISTER_BASE   = MOD
REGISTER_LIMIT  = REGISTER_BASE + REGISTERS     # first invalid operand code

CHAR_MASK       = 0xFF
EOF_VALUE       = 0xFFFF        # stored by INPUT once input is exhausted
