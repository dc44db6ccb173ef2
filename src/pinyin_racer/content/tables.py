"""Immutable reference data: flashcard letters, syllables and finals."""

from pinyin_racer.models.content import LetterCategory, LetterEntry, SyllableEntry

_I = LetterCategory.INITIAL
_F = LetterCategory.FINAL

# (category, letter, sound, image, word, description)
_LETTER_ROWS = [
    (_I, "b", "波", "📻", "广播", "广播的 b"),
    (_I, "p", "坡", "🍎", "苹果", "苹果的 p"),
    (_I, "m", "摸", "🐱", "猫咪", "猫咪的 m"),
    (_I, "f", "佛", "🌬️", "大风", "大风的 f"),
    (_I, "d", "得", "🥁", "打鼓", "打鼓的 d"),
    (_I, "t", "特", "🐰", "兔子", "兔子的 t"),
    (_I, "n", "讷", "🐄", "牛牛", "牛牛的 n"),
    (_I, "l", "勒", "🎺", "喇叭", "喇叭的 l"),
    (_I, "g", "哥", "🕊️", "鸽子", "鸽子的 g"),
    (_I, "k", "科", "🐸", "蝌蚪", "蝌蚪的 k"),
    (_I, "h", "喝", "🦊", "狐狸", "狐狸的 h"),
    (_I, "j", "鸡", "🐔", "小鸡", "小鸡的 j"),
    (_I, "q", "七", "🎈", "气球", "气球的 q"),
    (_I, "x", "西", "🍉", "西瓜", "西瓜的 x"),
    (_I, "zh", "知", "🕷️", "蜘蛛", "蜘蛛的 zh"),
    (_I, "ch", "吃", "🚂", "火车", "火车的 ch"),
    (_I, "sh", "师", "🦁", "狮子", "狮子的 sh"),
    (_I, "r", "日", "☀️", "太阳", "太阳的 r"),
    (_I, "z", "资", "✏️", "写字", "写字的 z"),
    (_I, "c", "次", "🦔", "刺猬", "刺猬的 c"),
    (_I, "s", "思", "🌲", "松树", "松树的 s"),
    (_I, "y", "衣", "👕", "衣服", "衣服的 y"),
    (_I, "w", "屋", "🐌", "蜗牛", "蜗牛的 w"),
    (_F, "a", "啊", "😮", "啊", "张大嘴巴 a"),
    (_F, "o", "哦", "⭕", "圆圈", "嘴巴圆圆 o"),
    (_F, "e", "鹅", "🦢", "白鹅", "白鹅的 e"),
    (_F, "i", "衣", "🐜", "蚂蚁", "蚂蚁的 i"),
    (_F, "u", "乌", "🐦", "乌鸦", "乌鸦的 u"),
    (_F, "ü", "鱼", "🐟", "小鱼", "小鱼的 ü"),
]

LETTERS: tuple[LetterEntry, ...] = tuple(
    LetterEntry(category=c, letter=letter, sound=sound, image=image, word=word, description=desc)
    for c, letter, sound, image, word, desc in _LETTER_ROWS
)

# Finals each initial can combine with.
PINYIN_MAP: dict[str, tuple[str, ...]] = {
    "b": ("a", "o", "i", "u", "ai", "ei", "ao", "an", "en", "ang", "eng", "ia", "ie", "iao",
          "ian", "in", "iang", "ing"),
    "p": ("a", "o", "i", "u", "ai", "ei", "ao", "ou", "an", "en", "ang", "eng", "ia", "ie",
          "iao", "ian", "in", "iang", "ing"),
    "m": ("a", "o", "e", "i", "u", "ai", "ei", "ao", "ou", "an", "en", "ang", "eng", "ia", "ie",
          "iao", "iu", "ian", "in", "iang", "ing"),
    "f": ("a", "o", "u", "ei", "ou", "an", "en", "ang", "eng"),
    "d": ("a", "e", "i", "u", "ai", "ei", "ao", "ou", "an", "en", "ang", "eng", "ia", "ie",
          "iao", "iu", "ian", "ing", "ong", "uo"),
    "t": ("a", "e", "i", "u", "ai", "ao", "ou", "an", "ang", "eng", "ia", "ie", "iao", "ian",
          "ing", "ong", "uo"),
    "n": ("a", "e", "i", "u", "ai", "ei", "ao", "ou", "an", "en", "ang", "eng", "ia", "ie",
          "iao", "iu", "ian", "in", "iang", "ing", "ong", "uo", "ü", "üe"),
    "l": ("a", "e", "i", "u", "ai", "ei", "ao", "ou", "an", "ang", "eng", "ia", "ie", "iao",
          "iu", "ian", "in", "iang", "ing", "ong", "uo", "ü", "üe"),
    "g": ("a", "e", "u", "ai", "ei", "ao", "ou", "an", "en", "ang", "eng", "ong", "ua", "uo",
          "uai", "uan", "un", "uang"),
    "k": ("a", "e", "u", "ai", "ao", "ou", "an", "en", "ang", "eng", "ong", "ua", "uo", "uai",
          "uan", "un", "uang"),
    "h": ("a", "e", "u", "ai", "ei", "ao", "ou", "an", "en", "ang", "eng", "ong", "ua", "uo",
          "uai", "uan", "un", "uang"),
    "j": ("i", "ia", "ie", "iao", "iu", "ian", "in", "iang", "ing", "ü", "üe", "üan", "ün"),
    "q": ("i", "ia", "ie", "iao", "iu", "ian", "in", "iang", "ing", "ü", "üe", "üan", "ün"),
    "x": ("i", "ia", "ie", "iao", "iu", "ian", "in", "iang", "ing", "ü", "üe", "üan", "ün"),
    "zh": ("a", "e", "i", "u", "ai", "ei", "ao", "ou", "an", "en", "ang", "eng", "ong", "ua",
           "uo", "uai", "uan", "un", "uang"),
    "ch": ("a", "e", "i", "u", "ai", "ao", "ou", "an", "en", "ang", "eng", "ong", "ua", "uo",
           "uai", "uan", "un", "uang"),
    "sh": ("a", "e", "i", "u", "ai", "ei", "ao", "ou", "an", "en", "ang", "eng", "ua", "uo",
           "uai", "uan", "un", "uang"),
    "r": ("e", "i", "u", "ao", "ou", "an", "en", "ang", "eng", "ong", "ua", "uo", "uan", "un"),
    "z": ("a", "e", "i", "u", "ai", "ei", "ao", "ou", "an", "en", "ang", "eng", "ong", "ua",
          "uo", "uan", "un"),
    "c": ("a", "e", "i", "u", "ai", "ao", "ou", "an", "en", "ang", "eng", "ong", "ua", "uo",
          "uan", "un"),
    "s": ("a", "e", "i", "u", "ai", "ao", "ou", "an", "en", "ang", "eng", "ong", "ua", "uo",
          "uan", "un"),
    "y": ("a", "e", "i", "u", "ao", "ou", "an", "in", "ang", "ing", "ong", "uan", "un", "üe",
          "üan"),
    "w": ("a", "o", "u", "ai", "ei", "an", "en", "ang", "eng"),
}

ALL_FINALS: tuple[str, ...] = (
    "a", "o", "e", "i", "u", "ü", "ai", "ei", "ao", "ou",
    "an", "en", "ang", "eng", "ong", "ia", "ie", "iao", "iu",
    "ian", "in", "iang", "ing", "iong", "ua", "uo", "uai", "uan",
    "un", "uang", "üe", "üan", "ün",
)

# syllable -> (glyph to speak, example word)
SYLLABLE_WORDS: dict[str, tuple[str, str]] = {
    "ba": ("爸", "爸爸"), "bo": ("波", "波浪"), "bi": ("笔", "铅笔"), "bu": ("布", "布娃娃"),
    "bai": ("白", "白云"), "bei": ("杯", "杯子"), "bao": ("包", "书包"), "ban": ("班", "班级"),
    "ben": ("本", "本子"), "bang": ("棒", "棒棒糖"), "bing": ("冰", "冰块"),
    "pa": ("爬", "爬山"), "pi": ("皮", "皮球"), "pu": ("葡", "葡萄"), "pao": ("跑", "跑步"),
    "pan": ("盘", "盘子"), "ping": ("瓶", "瓶子"),
    "ma": ("妈", "妈妈"), "mi": ("米", "大米"), "mu": ("木", "木头"), "mao": ("猫", "小猫"),
    "men": ("门", "大门"),
    "fa": ("发", "头发"), "fei": ("飞", "飞机"), "fan": ("饭", "米饭"), "feng": ("风", "大风"),
    "da": ("大", "大象"), "di": ("地", "土地"), "dao": ("刀", "小刀"), "deng": ("灯", "电灯"),
    "dong": ("冬", "冬天"),
    "ta": ("他", "他们"), "tu": ("兔", "兔子"), "tang": ("糖", "糖果"), "tian": ("天", "天空"),
    "na": ("拿", "拿东西"), "niu": ("牛", "牛奶"), "niao": ("鸟", "小鸟"),
    "la": ("拉", "拉手"), "lu": ("路", "马路"), "long": ("龙", "龙舟"),
    "ge": ("哥", "哥哥"), "gou": ("狗", "小狗"), "gua": ("瓜", "西瓜"),
    "ke": ("渴", "口渴"), "kou": ("口", "门口"),
    "hua": ("花", "花朵"), "hu": ("虎", "老虎"), "hong": ("红", "红色"),
    "ji": ("鸡", "小鸡"), "jia": ("家", "家人"),
    "qi": ("气", "气球"), "qiu": ("球", "皮球"),
    "xi": ("西", "西瓜"), "xie": ("鞋", "鞋子"),
    "zhi": ("知", "知了"), "zhu": ("猪", "小猪"),
    "chi": ("吃", "吃饭"), "che": ("车", "汽车"),
    "shi": ("狮", "狮子"), "shu": ("书", "书本"),
    "ri": ("日", "日出"), "zi": ("字", "写字"), "ci": ("刺", "刺猬"), "si": ("四", "四季"),
    "ya": ("鸭", "鸭子"), "yang": ("羊", "山羊"), "yu": ("鱼", "小鱼"),
    "wa": ("蛙", "青蛙"), "wu": ("屋", "房屋"),
}


def _build_syllables() -> tuple[SyllableEntry, ...]:
    entries = []
    for initial, finals in PINYIN_MAP.items():
        for final in finals:
            syllable = initial + final
            sound, word = SYLLABLE_WORDS.get(syllable, (syllable, ""))
            entries.append(
                SyllableEntry(initial=initial, final=final, syllable=syllable, sound=sound, word=word)
            )
    return tuple(entries)


SYLLABLES: tuple[SyllableEntry, ...] = _build_syllables()

_LETTERS_BY_KEY = {entry.letter: entry for entry in LETTERS}
_SYLLABLES_BY_KEY = {entry.syllable: entry for entry in SYLLABLES}


def find_letter(letter: str) -> LetterEntry | None:
    return _LETTERS_BY_KEY.get(letter)


def find_syllable(syllable: str) -> SyllableEntry | None:
    return _SYLLABLES_BY_KEY.get(syllable)


def letters_in_category(category: LetterCategory) -> list[LetterEntry]:
    return [entry for entry in LETTERS if entry.category == category]
