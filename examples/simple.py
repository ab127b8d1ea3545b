import sys

from highlight_spans import Token, check_tokens, scan_spans

source = "struct X { field: u32 }"
marks = "^----^ | | ^---^| ^-^ |"

# Spans drawn under the source line
for start, end in scan_spans(marks):
    sys.stdout.write(f"{start:>2} {end:>2} {source[start : end + 1]}\n")

tokens = [
    Token(0, 5, "keyword"),
    Token(7, 7, "type_name"),
    Token(9, 9, "punct"),
    Token(11, 15, "field"),
    Token(16, 16, "punct"),
    Token(18, 20, "type_name"),
    Token(22, 22, "punct"),
]
rules = ["keyword", "type_name", "punct", "field", "punct", "type_name", "punct"]

# Raises on the first divergence, with the source drawn in the message
check_tokens(tokens, rules, marks, source=source)
sys.stdout.write("ok\n")
