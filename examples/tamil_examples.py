"""
泰米爾文發音 key 範例 (Tamil Phonetic Key Examples)

本檔案展示 TamilEngine 的核心功能：
1. 基礎用法 - 三層 key
2. 字形分詞 - 檢視每個字形的編碼
3. 比對 - 精確比對與模糊比對
4. 計時回呼 - 收集編碼耗時
"""

import sys
from pathlib import Path

root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir / "src"))

from tmphone import TamilEngine

engine = TamilEngine()


def demo_keys():
    """三層 key"""
    print("=" * 60)
    print("範例 1: 三層 key (key0, key1, key2)")
    print("=" * 60)

    for word in ["தமிழ்", "மிகவும்", "சிப்பாய்", "பஞ்சவர்ணம்", "திங்கள்", "வௌவால்"]:
        key0, key1, key2 = engine.encode(word)
        print(f"  {word:<12} key0={key0:<10} key1={key1:<10} key2={key2}")
    print()


def demo_segments():
    """字形分詞"""
    print("=" * 60)
    print("範例 2: 字形分詞")
    print("=" * 60)

    for token in engine.tokenizer.tokenize("சிப்பாய்"):
        flag = "*" if token.modified else " "
        print(f"  {token.text:<6} {token.category:<10}{flag} -> {token.code!r}")
    print()


def demo_matching():
    """精確比對與模糊比對"""
    print("=" * 60)
    print("範例 3: 比對")
    print("=" * 60)

    pairs = [
        ("பஞ்சவர்ணம்", "பஞ்சவர்னம்"),
        ("மிர்", "மோர்"),
        ("திங்கள்", "திங்கல்"),
        ("தமிழ்", "மோர்"),
    ]
    for a, b in pairs:
        print(
            f"  {a} / {b}: "
            f"match(key1)={engine.is_match(a, b)} "
            f"match(key2)={engine.is_match(a, b, level=2)} "
            f"fuzzy={engine.is_fuzzy_match(a, b)}"
        )
    print()


def demo_timing():
    """使用 on_timing 回呼收集計時資訊"""
    print("=" * 60)
    print("範例 4: 計時回呼")
    print("=" * 60)

    timing_data = []
    timed = TamilEngine(on_timing=lambda op, elapsed: timing_data.append((op, elapsed)))
    for word in ["தமிழ்", "அங்காடி", "தண்ணீர்"]:
        timed.encode(word)

    for op, elapsed in timing_data:
        print(f"  {op}: {elapsed * 1000:.3f}ms")
    print()


if __name__ == "__main__":
    demo_keys()
    demo_segments()
    demo_matching()
    demo_timing()
