"""Japanese messages."""

TRANSLATIONS = {
    "label.title": "待ち牌計算機",
    "label.subtitle": "13枚の手牌からアガリ牌を探します",
    "label.hand": "手牌",
    "label.tile_count": "{n}枚",
    "label.random_hand": "ランダム手牌",

    "prompt.hand": "手牌を入力 (例: 1112345678999m / r=ランダム / q=終了)",

    "msg.empty_hand": "手牌を入力してください。",
    "msg.waits": "待ちは: {tiles}",
    "msg.no_waits": "有効な待ちがありません。",
    "msg.not_13": "手牌が13枚ではありません ({n}枚)。",
    "msg.invalid_input": "入力が不正です: {error}",
    "msg.log_saved": "ログを保存しました: {path}",
    "msg.goodbye": "終了します。",

    "shape.seven_pairs": "七対子",
    "shape.standard": "一般形",
}
