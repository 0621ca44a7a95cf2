"""ユーザー ID からロールアウト用バケットを決定する"""

from __future__ import annotations

BUCKET_COUNT = 100

_MASK_32 = 0xFFFFFFFF
_SIGN_BIT_32 = 0x80000000


def hash_identifier(user_id: str) -> int:
    """識別子の 32bit 符号付きローリングハッシュを返す。

    h = h * 31 + code を 1 文字ごとに 32bit で切り詰める。
    code は UTF-16 コードユニットで、BMP 外の文字はサロゲートペアの
    2 ユニットとして加算される。
    """
    h = 0
    data = user_id.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        code = data[i] | (data[i + 1] << 8)
        h = (h * 31 + code) & _MASK_32
    if h & _SIGN_BIT_32:
        h -= 1 << 32
    return h


def get_bucket(user_id: str) -> int:
    """識別子を [0, 100) のバケットに割り当てる。空文字列は 0。"""
    return abs(hash_identifier(user_id)) % BUCKET_COUNT
