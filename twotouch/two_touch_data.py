"""
Static two-touch input tables.

Literal data only. The tables are assembled and validated by
`twotouch.services.tables.TableBuilderService`.

References:
- https://ja.wikipedia.org/wiki/2%E3%82%BF%E3%83%83%E3%83%81%E5%85%A5%E5%8A%9B
- https://koma-yome.com/archives/724
"""

# ════════════════════════════════════════════════════════════════════════════════
# BASE CODES (one character, two digits)
# ════════════════════════════════════════════════════════════════════════════════

# Rows 1-0 of the keypad: first digit selects the row, second digit the column.
KANA_CODES = (
    ("あ", "11"), ("い", "12"), ("う", "13"), ("え", "14"), ("お", "15"),
    ("か", "21"), ("き", "22"), ("く", "23"), ("け", "24"), ("こ", "25"),
    ("さ", "31"), ("し", "32"), ("す", "33"), ("せ", "34"), ("そ", "35"),
    ("た", "41"), ("ち", "42"), ("つ", "43"), ("て", "44"), ("と", "45"),
    ("な", "51"), ("に", "52"), ("ぬ", "53"), ("ね", "54"), ("の", "55"),
    ("は", "61"), ("ひ", "62"), ("ふ", "63"), ("へ", "64"), ("ほ", "65"),
    ("ま", "71"), ("み", "72"), ("む", "73"), ("め", "74"), ("も", "75"),
    ("や", "81"), ("(", "82"), ("ゆ", "83"), (")", "84"), ("よ", "85"),
    ("ら", "91"), ("り", "92"), ("る", "93"), ("れ", "94"), ("ろ", "95"),
    ("わ", "01"), ("を", "02"), ("ん", "03"), ("゛", "04"), ("゜", "05"),
)

# Columns 6-0 of each row.
LATIN_CODES = (
    ("A", "16"), ("B", "17"), ("C", "18"), ("D", "19"), ("E", "10"),
    ("F", "26"), ("G", "27"), ("H", "28"), ("I", "29"), ("J", "20"),
    ("K", "36"), ("L", "37"), ("M", "38"), ("N", "39"), ("O", "30"),
    ("P", "46"), ("Q", "47"), ("R", "48"), ("S", "49"), ("T", "40"),
    ("U", "56"), ("V", "57"), ("W", "58"), ("X", "59"), ("Y", "50"),
    ("Z", "66"), ("?", "67"), ("!", "68"), ("-", "69"), ("/", "60"),
    ("\\", "76"), ("&", "77"),
    ("*", "86"), ("#", "87"), (" ", "88"),
    ("1", "96"), ("2", "97"), ("3", "98"), ("4", "99"), ("5", "90"),
    ("6", "06"), ("7", "07"), ("8", "08"), ("9", "09"), ("0", "00"),
)

# ════════════════════════════════════════════════════════════════════════════════
# COMPOSITE CODES (base kana + mark)
# ════════════════════════════════════════════════════════════════════════════════

VOICED_MARK = "゛"
SEMI_VOICED_MARK = "゜"

# Combining marks produced by NFD, mapped to the spacing marks in the table.
COMBINING_MARKS = {
    "\u3099": VOICED_MARK,
    "\u309a": SEMI_VOICED_MARK,
}

VOICED_KANA = "がぎぐげござじずぜぞだぢづでどばびぶべぼ"
SEMI_VOICED_KANA = "ぱぴぷぺぽ"

# ════════════════════════════════════════════════════════════════════════════════
# NORMALIZATION VARIANTS
# ════════════════════════════════════════════════════════════════════════════════

SMALL_KANA = {
    "ぁ": "あ",
    "ぃ": "い",
    "ぅ": "う",
    "ぇ": "え",
    "ぉ": "お",
    "っ": "つ",
    "ゃ": "や",
    "ゅ": "ゆ",
    "ょ": "よ",
}

# Full-width letters and digits are derived with jaconv; these are the
# remaining variants that have no one-to-one ASCII counterpart there.
FULL_WIDTH_PUNCTUATION = {
    "（": "(",
    "）": ")",
    "？": "?",
    "！": "!",
    "－": "-",
    "／": "/",
    "￥": "\\",
    "＆": "&",
    "＊": "*",
    "＃": "#",
    "　": " ",
}

LONG_VOWEL_MARKS = {
    "ー": "-",
}

# ════════════════════════════════════════════════════════════════════════════════
# PHRASE SHORTCUTS
# ════════════════════════════════════════════════════════════════════════════════

# Each entry: (spellings, shortcuts). Shortcuts are listed in preference order.
PHRASE_SHORTCUTS = (
    (("今", "いま"), ("10",)),
    (("海", "うみ", "シー", "しー"), ("41",)),
    (("至急", "しきゅう"), ("49",)),
    (("待ってる", "まってる", "TEL", "ＴＥＬ", "テル"), ("106",)),
    (("遅れてる", "おくれてる"), ("9106",)),
    (("愛してる", "あいしてる"), ("14106", "114106", "1410")),
    (("何してる", "なにしてる"), ("724106",)),
    (("起きてる", "おきてる"), ("09106", "9106")),
    (("行くよ", "いくよ"), ("194",)),
    (("池袋", "いけぶくろ"), ("269",)),
    (("渋谷", "しぶや"), ("428",)),
    (("おやすみ",), ("833",)),
    (("おはよう",), ("840", "0840")),
    (("ハロー",), ("860",)),
    (("はやく", "早く"), ("889",)),
    (("サンキュー", "Thank you", "thank you"), ("39", "999")),
    (("会えない", "あえない"), ("1871",)),
    (("さよなら",), ("3470",)),
    (("寒いよ", "さむいよ"), ("3614",)),
    (("仕事", "しごと"), ("4510",)),
    (("横浜", "よこはま"), ("4580",)),
    (("よろしく",), ("4649",)),
    (("ファイト", "ふぁいと"), ("5110",)),
    (("お仕事ファイト", "おしごとふぁいと"), ("045105110",)),
    (("ご苦労さん", "ごくろうさん"), ("5963",)),
    (("バイト", "ばいと"), ("8110",)),
    (("バイバイ", "ばいばい"), ("8181",)),
    (("今どこ", "いまどこ"), ("10105",)),
    (("会いたいよ",), ("110149",)),
    (("あいたいよ",), ("11014",)),
    (("着いたよ", "ついたよ"), ("21104",)),
    (("寂しいよ", "さびしいよ"), ("33414",)),
    (("デートしよ", "でーとしよ"), ("101044",)),
    (("TEL欲しい", "TELほしい"), ("106841",)),
    (("ごめんなさい",), ("500731",)),
    (("早くして", "はやくして"), ("889410",)),
    (("どこにいるの",), ("1052167",)),
    (("今から行くよ", "いまからいくよ"), ("1056194",)),
    (("ボウリング行こ", "ボウリングいこ"), ("015",)),
    (("遅れる", "おくれる"), ("090",)),
    (("ずっと一緒にいようね", "ずっといっしょにいようね"), ("2101442147",)),
    (("ずっと一緒にいよーね", "ずっといっしょにいよーね"), ("21014421479",)),
)
