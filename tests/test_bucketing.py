"""バケット計算のユニットテスト"""

from flag_rollout import BUCKET_COUNT, get_bucket, hash_identifier


def test_empty_string_hashes_to_zero() -> None:
    """空文字列はハッシュ 0・バケット 0。"""
    assert hash_identifier("") == 0
    assert get_bucket("") == 0


def test_known_bucket_values() -> None:
    """既知の識別子のバケット値が変わらないこと。"""
    assert hash_identifier("a") == 97
    assert get_bucket("ab") == 5
    assert hash_identifier("alice") == 92903040
    assert get_bucket("alice") == 40


def test_hash_wraps_to_signed_32bit() -> None:
    """オーバーフロー時に 32bit 符号付きで折り返すこと。"""
    assert hash_identifier("user-42") == -147182656
    assert get_bucket("user-42") == 56


def test_hash_stays_within_32bit_range() -> None:
    """長い文字列でも 32bit 符号付き範囲に収まること。"""
    h = hash_identifier("x" * 10_000)
    assert -(2**31) <= h < 2**31


def test_non_bmp_characters_use_utf16_units() -> None:
    """BMP 外の文字はサロゲートペアとして加算されること。"""
    # 0xD83D * 31 + 0xDE00
    assert hash_identifier("\U0001F600") == 1772899
    assert get_bucket("\U0001F600") == 99


def test_bucket_range_for_various_inputs() -> None:
    """どの入力でも [0, 100) の整数を返すこと。"""
    inputs = ["", "a", "alice", "user-42", "é", "日本語ユーザー", "\U0001F600" * 50, "z" * 5000]
    inputs += [f"user-{i}" for i in range(500)]
    for user_id in inputs:
        bucket = get_bucket(user_id)
        assert isinstance(bucket, int)
        assert 0 <= bucket < BUCKET_COUNT


def test_bucket_is_deterministic() -> None:
    """同じ入力は常に同じバケット。"""
    assert get_bucket("session-abc") == get_bucket("session-abc")
