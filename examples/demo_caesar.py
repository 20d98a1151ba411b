"""
caesar_cipher — Live Demo
=========================
Run:  python examples/demo_caesar.py

Shows each way of keying the cipher encrypting and decrypting a message,
with the alphabets and key fingerprint printed for each.
"""

import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from caesar_cipher import CaesarCipher, DegenerateCipherError

LINE = "═" * 70
MSG  = "Attack at dawn, hold the bridge until 6pm!"

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

def show(c):
    ok("Plain  alphabet", c.plain_alphabet)
    ok("Cipher alphabet", c.cipher_alphabet)
    ok("Fingerprint",     c.mapping.fingerprint())
    ct = c.encrypt(MSG)
    ok("Encrypted", ct)
    ok("Decrypted", c.decrypt(ct))

# ─────────────────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  caesar_cipher — Demo")
print(LINE)
print(f"  Message: {MSG}")

header("Classic Caesar — offset 3")
show(CaesarCipher(offset=3))

header("Offset as a letter — 'k'")
show(CaesarCipher(offset="k"))

header("Aristocrat — cypher key 'zebra'")
show(CaesarCipher(cypher_key="zebra"))

header("Keyed plaintext — plain key 'sassy' + offset 3")
show(CaesarCipher(plain_key="sassy", offset=3))

header("Rejected — cypher key 'sassy' + offset 1")
try:
    CaesarCipher(cypher_key="sassy", offset=1)
except DegenerateCipherError as e:
    ok("Refused", str(e))

print(f"\n{LINE}\n")
