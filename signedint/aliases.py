"""
Ready-made widths: zero, one and every multiple of 8 up to 256 bits
"""
from .signed import Signed
from .uint import Uint

U0 = Uint[0]
U1 = Uint[1]
U8 = Uint[8]
U16 = Uint[16]
U24 = Uint[24]
U32 = Uint[32]
U40 = Uint[40]
U48 = Uint[48]
U56 = Uint[56]
U64 = Uint[64]
U72 = Uint[72]
U80 = Uint[80]
U88 = Uint[88]
U96 = Uint[96]
U104 = Uint[104]
U112 = Uint[112]
U120 = Uint[120]
U128 = Uint[128]
U136 = Uint[136]
U144 = Uint[144]
U152 = Uint[152]
U160 = Uint[160]
U168 = Uint[168]
U176 = Uint[176]
U184 = Uint[184]
U192 = Uint[192]
U200 = Uint[200]
U208 = Uint[208]
U216 = Uint[216]
U224 = Uint[224]
U232 = Uint[232]
U240 = Uint[240]
U248 = Uint[248]
U256 = Uint[256]

I0 = Signed[0]
I1 = Signed[1]
I8 = Signed[8]
I16 = Signed[16]
I24 = Signed[24]
I32 = Signed[32]
I40 = Signed[40]
I48 = Signed[48]
I56 = Signed[56]
I64 = Signed[64]
I72 = Signed[72]
I80 = Signed[80]
I88 = Signed[88]
I96 = Signed[96]
I104 = Signed[104]
I112 = Signed[112]
I120 = Signed[120]
I128 = Signed[128]
I136 = Signed[136]
I144 = Signed[144]
I152 = Signed[152]
I160 = Signed[160]
I168 = Signed[168]
I176 = Signed[176]
I184 = Signed[184]
I192 = Signed[192]
I200 = Signed[200]
I208 = Signed[208]
I216 = Signed[216]
I224 = Signed[224]
I232 = Signed[232]
I240 = Signed[240]
I248 = Signed[248]
I256 = Signed[256]
