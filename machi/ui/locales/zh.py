"""Chinese messages."""

TRANSLATIONS = {
    "label.title": "听牌计算器",
    "label.subtitle": "计算13张手牌的和牌张",
    "label.hand": "手牌",
    "label.tile_count": "{n}张",
    "label.random_hand": "随机手牌",

    "prompt.hand": "输入手牌 (例: 1112345678999m / r=随机 / q=退出)",

    "msg.empty_hand": "请输入手牌。",
    "msg.waits": "听牌: {tiles}",
    "msg.no_waits": "没有有效的听牌。",
    "msg.not_13": "手牌不是13张 ({n}张)。",
    "msg.invalid_input": "输入无效: {error}",
    "msg.log_saved": "日志已保存: {path}",
    "msg.goodbye": "再见。",

    "shape.seven_pairs": "七对子",
    "shape.standard": "一般型",
}
