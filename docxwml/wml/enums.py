# Copyright (C) 2025 the contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.

"""WordprocessingML enumerations shared by several parts of the model.

Values are the exact strings written in the XML. Enumerations used by a
single part (tables, drawings, settings) live next to that part.
"""

from __future__ import annotations

from docxwml.xsdtypes import XsdEnum


# ── Colors and text effects ────────────────────────────────────────────────────

class ThemeColor(XsdEnum):
    DARK1 = "dark1"
    LIGHT1 = "light1"
    DARK2 = "dark2"
    LIGHT2 = "light2"
    ACCENT1 = "accent1"
    ACCENT2 = "accent2"
    ACCENT3 = "accent3"
    ACCENT4 = "accent4"
    ACCENT5 = "accent5"
    ACCENT6 = "accent6"
    HYPERLINK = "hyperlink"
    FOLLOWED_HYPERLINK = "followedHyperlink"
    NONE = "none"
    BACKGROUND1 = "background1"
    TEXT1 = "text1"
    BACKGROUND2 = "background2"
    TEXT2 = "text2"


class HighlightColor(XsdEnum):
    BLACK = "black"
    BLUE = "blue"
    CYAN = "cyan"
    GREEN = "green"
    MAGENTA = "magenta"
    RED = "red"
    YELLOW = "yellow"
    WHITE = "white"
    DARK_BLUE = "darkBlue"
    DARK_CYAN = "darkCyan"
    DARK_GREEN = "darkGreen"
    DARK_MAGENTA = "darkMagenta"
    DARK_RED = "darkRed"
    DARK_YELLOW = "darkYellow"
    DARK_GRAY = "darkGray"
    LIGHT_GRAY = "lightGray"
    NONE = "none"


class UnderlineType(XsdEnum):
    SINGLE = "single"
    WORDS = "words"
    DOUBLE = "double"
    THICK = "thick"
    DOTTED = "dotted"
    DOTTED_HEAVY = "dottedHeavy"
    DASH = "dash"
    DASHED_HEAVY = "dashedHeavy"
    DASH_LONG = "dashLong"
    DASH_LONG_HEAVY = "dashLongHeavy"
    DOT_DASH = "dotDash"
    DASH_DOT_HEAVY = "dashDotHeavy"
    DOT_DOT_DASH = "dotDotDash"
    DASH_DOT_DOT_HEAVY = "dashDotDotHeavy"
    WAVE = "wave"
    WAVY_HEAVY = "wavyHeavy"
    WAVY_DOUBLE = "wavyDouble"
    NONE = "none"


class TextEffect(XsdEnum):
    BLINK_BACKGROUND = "blinkBackground"
    LIGHTS = "lights"
    ANTS_BLACK = "antsBlack"
    ANTS_RED = "antsRed"
    SHIMMER = "shimmer"
    SPARKLE = "sparkle"
    NONE = "none"


class Em(XsdEnum):
    NONE = "none"
    DOT = "dot"
    COMMA = "comma"
    CIRCLE = "circle"
    UNDER_DOT = "underDot"


class CombineBrackets(XsdEnum):
    NONE = "none"
    ROUND = "round"
    SQUARE = "square"
    ANGLE = "angle"
    CURLY = "curly"


# ── Fonts ──────────────────────────────────────────────────────────────────────

class HintType(XsdEnum):
    DEFAULT = "default"
    EAST_ASIA = "eastAsia"
    COMPLEX_SCRIPT = "cs"


class ThemeFont(XsdEnum):
    MAJOR_EAST_ASIA = "majorEastAsia"
    MAJOR_BIDI = "majorBidi"
    MAJOR_ASCII = "majorAscii"
    MAJOR_H_ANSI = "majorHAnsi"
    MINOR_EAST_ASIA = "minorEastAsia"
    MINOR_BIDI = "minorBidi"
    MINOR_ASCII = "minorAscii"
    MINOR_H_ANSI = "minorHAnsi"


# ── Borders and shading ────────────────────────────────────────────────────────

class BorderType(XsdEnum):
    NIL = "nil"
    NONE = "none"
    SINGLE = "single"
    THICK = "thick"
    DOUBLE = "double"
    DOTTED = "dotted"
    DASHED = "dashed"
    DOT_DASH = "dotDash"
    DOT_DOT_DASH = "dotDotDash"
    TRIPLE = "triple"
    THIN_THICK_SMALL_GAP = "thinThickSmallGap"
    THICK_THIN_SMALL_GAP = "thickThinSmallGap"
    THIN_THICK_THIN_SMALL_GAP = "thinThickThinSmallGap"
    THIN_THICK_MEDIUM_GAP = "thinThickMediumGap"
    THICK_THIN_MEDIUM_GAP = "thickThinMediumGap"
    THIN_THICK_THIN_MEDIUM_GAP = "thinThickThinMediumGap"
    THIN_THICK_LARGE_GAP = "thinThickLargeGap"
    THICK_THIN_LARGE_GAP = "thickThinLargeGap"
    THIN_THICK_THIN_LARGE_GAP = "thinThickThinLargeGap"
    WAVE = "wave"
    DOUBLE_WAVE = "doubleWave"
    DASH_SMALL_GAP = "dashSmallGap"
    DASH_DOT_STROKED = "dashDotStroked"
    THREE_D_EMBOSS = "threeDEmboss"
    THREE_D_ENGRAVE = "threeDEngrave"
    OUTSET = "outset"
    INSET = "inset"
    APPLES = "apples"
    ARCHED_SCALLOPS = "archedScallops"
    BABY_PACIFIER = "babyPacifier"
    BABY_RATTLE = "babyRattle"
    BALLOONS_3_COLORS = "balloons3Colors"
    BALLOONS_HOT_AIR = "balloonsHotAir"
    BASIC_BLACK_DASHES = "basicBlackDashes"
    BASIC_BLACK_DOTS = "basicBlackDots"
    BASIC_BLACK_SQUARES = "basicBlackSquares"
    BASIC_THIN_LINES = "basicThinLines"
    BASIC_WHITE_DASHES = "basicWhiteDashes"
    BASIC_WHITE_DOTS = "basicWhiteDots"
    BASIC_WHITE_SQUARES = "basicWhiteSquares"
    BASIC_WIDE_INLINE = "basicWideInline"
    BASIC_WIDE_MIDLINE = "basicWideMidline"
    BASIC_WIDE_OUTLINE = "basicWideOutline"
    BATS = "bats"
    BIRDS = "birds"
    BIRDS_FLIGHT = "birdsFlight"
    CABINS = "cabins"
    CAKE_SLICE = "cakeSlice"
    CANDY_CORN = "candyCorn"
    CELTIC_KNOTWORK = "celticKnotwork"
    CERTIFICATE_BANNER = "certificateBanner"
    CHAIN_LINK = "chainLink"
    CHAMPAGNE_BOTTLE = "champagneBottle"
    CHECKED_BAR_BLACK = "checkedBarBlack"
    CHECKED_BAR_COLOR = "checkedBarColor"
    CHECKERED = "checkered"
    CHRISTMAS_TREE = "christmasTree"
    CIRCLES_LINES = "circlesLines"
    CIRCLES_RECTANGLES = "circlesRectangles"
    CLASSICAL_WAVE = "classicalWave"
    CLOCKS = "clocks"
    COMPASS = "compass"
    CONFETTI = "confetti"
    CONFETTI_GRAYS = "confettiGrays"
    CONFETTI_OUTLINE = "confettiOutline"
    CONFETTI_STREAMERS = "confettiStreamers"
    CONFETTI_WHITE = "confettiWhite"
    CORNER_TRIANGLES = "cornerTriangles"
    COUPON_CUTOUT_DASHES = "couponCutoutDashes"
    COUPON_CUTOUT_DOTS = "couponCutoutDots"
    CRAZY_MAZE = "crazyMaze"
    CREATURES_BUTTERFLY = "creaturesButterfly"
    CREATURES_FISH = "creaturesFish"
    CREATURES_INSECTS = "creaturesInsects"
    CREATURES_LADY_BUG = "creaturesLadyBug"
    CROSS_STITCH = "crossStitch"
    CUP = "cup"
    DECO_ARCH = "decoArch"
    DECO_ARCH_COLOR = "decoArchColor"
    DECO_BLOCKS = "decoBlocks"
    DIAMONDS_GRAY = "diamondsGray"
    DOUBLE_D = "doubleD"
    DOUBLE_DIAMONDS = "doubleDiamonds"
    EARTH1 = "earth1"
    EARTH2 = "earth2"
    EARTH3 = "earth3"
    ECLIPSING_SQUARES1 = "eclipsingSquares1"
    ECLIPSING_SQUARES2 = "eclipsingSquares2"
    EGGS_BLACK = "eggsBlack"
    FANS = "fans"
    FILM = "film"
    FIRECRACKERS = "firecrackers"
    FLOWERS_BLOCK_PRINT = "flowersBlockPrint"
    FLOWERS_DAISIES = "flowersDaisies"
    FLOWERS_MODERN1 = "flowersModern1"
    FLOWERS_MODERN2 = "flowersModern2"
    FLOWERS_PANSY = "flowersPansy"
    FLOWERS_RED_ROSE = "flowersRedRose"
    FLOWERS_ROSES = "flowersRoses"
    FLOWERS_TEACUP = "flowersTeacup"
    FLOWERS_TINY = "flowersTiny"
    GEMS = "gems"
    GINGERBREAD_MAN = "gingerbreadMan"
    GRADIENT = "gradient"
    HANDMADE1 = "handmade1"
    HANDMADE2 = "handmade2"
    HEART_BALLOON = "heartBalloon"
    HEART_GRAY = "heartGray"
    HEARTS = "hearts"
    HEEBIE_JEEBIES = "heebieJeebies"
    HOLLY = "holly"
    HOUSE_FUNKY = "houseFunky"
    HYPNOTIC = "hypnotic"
    ICE_CREAM_CONES = "iceCreamCones"
    LIGHT_BULB = "lightBulb"
    LIGHTNING1 = "lightning1"
    LIGHTNING2 = "lightning2"
    MAP_PINS = "mapPins"
    MAPLE_LEAF = "mapleLeaf"
    MAPLE_MUFFINS = "mapleMuffins"
    MARQUEE = "marquee"
    MARQUEE_TOOTHED = "marqueeToothed"
    MOONS = "moons"
    MOSAIC = "mosaic"
    MUSIC_NOTES = "musicNotes"
    NORTHWEST = "northwest"
    OVALS = "ovals"
    PACKAGES = "packages"
    PALMS_BLACK = "palmsBlack"
    PALMS_COLOR = "palmsColor"
    PAPER_CLIPS = "paperClips"
    PAPYRUS = "papyrus"
    PARTY_FAVOR = "partyFavor"
    PARTY_GLASS = "partyGlass"
    PENCILS = "pencils"
    PEOPLE = "people"
    PEOPLE_WAVING = "peopleWaving"
    PEOPLE_HATS = "peopleHats"
    POINSETTIAS = "poinsettias"
    POSTAGE_STAMP = "postageStamp"
    PUMPKIN1 = "pumpkin1"
    PUSH_PIN_NOTE2 = "pushPinNote2"
    PUSH_PIN_NOTE1 = "pushPinNote1"
    PYRAMIDS = "pyramids"
    PYRAMIDS_ABOVE = "pyramidsAbove"
    QUADRANTS = "quadrants"
    RINGS = "rings"
    SAFARI = "safari"
    SAWTOOTH = "sawtooth"
    SAWTOOTH_GRAY = "sawtoothGray"
    SCARED_CAT = "scaredCat"
    SEATTLE = "seattle"
    SHADOWED_SQUARES = "shadowedSquares"
    SHARKS_TEETH = "sharksTeeth"
    SHOREBIRD_TRACKS = "shorebirdTracks"
    SKYROCKET = "skyrocket"
    SNOWFLAKE_FANCY = "snowflakeFancy"
    SNOWFLAKES = "snowflakes"
    SOMBRERO = "sombrero"
    SOUTHWEST = "southwest"
    STARS = "stars"
    STARS_TOP = "starsTop"
    STARS_3D = "stars3d"
    STARS_BLACK = "starsBlack"
    STARS_SHADOWED = "starsShadowed"
    SUN = "sun"
    SWIRLIGIG = "swirligig"
    TORN_PAPER = "tornPaper"
    TORN_PAPER_BLACK = "tornPaperBlack"
    TREES = "trees"
    TRIANGLE_PARTY = "triangleParty"
    TRIANGLES = "triangles"
    TRIANGLE1 = "triangle1"
    TRIANGLE2 = "triangle2"
    TRIANGLE_CIRCLE1 = "triangleCircle1"
    TRIANGLE_CIRCLE2 = "triangleCircle2"
    SHAPES1 = "shapes1"
    SHAPES2 = "shapes2"
    TWISTED_LINES1 = "twistedLines1"
    TWISTED_LINES2 = "twistedLines2"
    VINE = "vine"
    WAVELINE = "waveline"
    WEAVING_ANGLES = "weavingAngles"
    WEAVING_BRAID = "weavingBraid"
    WEAVING_RIBBON = "weavingRibbon"
    WEAVING_STRIPS = "weavingStrips"
    WHITE_FLOWERS = "whiteFlowers"
    WOODWORK = "woodwork"
    X_ILLUSIONS = "xIllusions"
    ZANY_TRIANGLES = "zanyTriangles"
    ZIG_ZAG = "zigZag"
    ZIG_ZAG_STITCH = "zigZagStitch"
    CUSTOM = "custom"


class ShdType(XsdEnum):
    NIL = "nil"
    CLEAR = "clear"
    SOLID = "solid"
    HORIZONTAL_STRIPE = "horzStripe"
    VERTICAL_STRIPE = "vertStripe"
    REVERSE_DIAGONAL_STRIPE = "reverseDiagStripe"
    DIAGONAL_STRIPE = "diagStripe"
    HORIZONTAL_CROSS = "horzCross"
    DIAGONAL_CROSS = "diagCross"
    THIN_HORIZONTAL_STRIPE = "thinHorzStripe"
    THIN_VERTICAL_STRIPE = "thinVertStripe"
    THIN_REVERSE_DIAGONAL_STRIPE = "thinReverseDiagStripe"
    THIN_DIAGONAL_STRIPE = "thinDiagStripe"
    THIN_HORIZONTAL_CROSS = "thinHorzCross"
    THIN_DIAGONAL_CROSS = "thinDiagCross"
    PERCENT5 = "pct5"
    PERCENT10 = "pct10"
    PERCENT12 = "pct12"
    PERCENT15 = "pct15"
    PERCENT20 = "pct20"
    PERCENT25 = "pct25"
    PERCENT30 = "pct30"
    PERCENT35 = "pct35"
    PERCENT37 = "pct37"
    PERCENT40 = "pct40"
    PERCENT45 = "pct45"
    PERCENT50 = "pct50"
    PERCENT55 = "pct55"
    PERCENT60 = "pct60"
    PERCENT62 = "pct62"
    PERCENT65 = "pct65"
    PERCENT70 = "pct70"
    PERCENT75 = "pct75"
    PERCENT80 = "pct80"
    PERCENT85 = "pct85"
    PERCENT87 = "pct87"
    PERCENT90 = "pct90"
    PERCENT95 = "pct95"


# ── Paragraph layout ───────────────────────────────────────────────────────────

class Jc(XsdEnum):
    START = "start"
    CENTER = "center"
    END = "end"
    BOTH = "both"
    MEDIUM_KASHIDA = "mediumKashida"
    DISTRIBUTE = "distribute"
    NUM_TAB = "numTab"
    HIGH_KASHIDA = "highKashida"
    LOW_KASHIDA = "lowKashida"
    THAI_DISTRIBUTE = "thaiDistribute"
    LEFT = "left"
    RIGHT = "right"


class TextDirection(XsdEnum):
    TOP_TO_BOTTOM = "tb"
    RIGHT_TO_LEFT = "rl"
    LEFT_TO_RIGHT = "lr"
    TOP_TO_BOTTOM_ROTATED = "tbV"
    RIGHT_TO_LEFT_ROTATED = "rlV"
    LEFT_TO_RIGHT_ROTATED = "lrV"
    BOTTOM_TO_TOP_LEFT_TO_RIGHT = "btLr"
    LEFT_TO_RIGHT_TOP_TO_BOTTOM = "lrTb"
    LEFT_TO_RIGHT_TOP_TO_BOTTOM_ROTATED = "lrTbV"
    TOP_TO_BOTTOM_LEFT_TO_RIGHT_ROTATED = "tbLrV"
    TOP_TO_BOTTOM_RIGHT_TO_LEFT = "tbRl"
    TOP_TO_BOTTOM_RIGHT_TO_LEFT_ROTATED = "tbRlV"


class TextAlignment(XsdEnum):
    TOP = "top"
    CENTER = "center"
    BASELINE = "baseline"
    BOTTOM = "bottom"
    AUTO = "auto"


class TextboxTightWrap(XsdEnum):
    NONE = "none"
    ALL_LINES = "allLines"
    FIRST_AND_LAST_LINE = "firstAndLastLine"
    FIRST_LINE_ONLY = "firstLineOnly"
    LAST_LINE_ONLY = "lastLineOnly"


class LineSpacingRule(XsdEnum):
    AUTO = "auto"
    EXACT = "exact"
    AT_LEAST = "atLeast"


class TabJc(XsdEnum):
    CLEAR = "clear"
    START = "start"
    CENTER = "center"
    END = "end"
    DECIMAL = "decimal"
    BAR = "bar"
    NUMBER = "num"
    LEFT = "left"
    RIGHT = "right"


class TabTlc(XsdEnum):
    NONE = "none"
    DOT = "dot"
    HYPHEN = "hyphen"
    UNDERSCORE = "underscore"
    HEAVY = "heavy"
    MIDDLE_DOT = "middleDot"


class DropCap(XsdEnum):
    NONE = "none"
    DROP = "drop"
    MARGIN = "margin"


class HeightRule(XsdEnum):
    AUTO = "auto"
    EXACT = "exact"
    AT_LEAST = "atLeast"


class Wrap(XsdEnum):
    AUTO = "auto"
    NOT_BESIDE = "notBeside"
    AROUND = "around"
    TIGHT = "tight"
    THROUGH = "through"
    NONE = "none"


class HAnchor(XsdEnum):
    TEXT = "text"
    MARGIN = "margin"
    PAGE = "page"


class VAnchor(XsdEnum):
    TEXT = "text"
    MARGIN = "margin"
    PAGE = "page"


class VerticalJc(XsdEnum):
    TOP = "top"
    CENTER = "center"
    BOTH = "both"
    BOTTOM = "bottom"


# ── Numbering ──────────────────────────────────────────────────────────────────

class NumberFormat(XsdEnum):
    DECIMAL = "decimal"
    UPPER_ROMAN = "upperRoman"
    LOWER_ROMAN = "lowerRoman"
    UPPER_LETTER = "upperLetter"
    LOWER_LETTER = "lowerLetter"
    ORDINAL = "ordinal"
    CARDINAL_TEXT = "cardinalText"
    ORDINAL_TEXT = "ordinalText"
    HEX = "hex"
    CHICAGO = "chicago"
    IDEOGRAPH_DIGITAL = "ideographDigital"
    JAPANESE_COUNTING = "japaneseCounting"
    AIUEO = "aiueo"
    IROHA = "iroha"
    DECIMAL_FULL_WIDTH = "decimalFullWidth"
    DECIMAL_HALF_WIDTH = "decimalHalfWidth"
    JAPANESE_LEGAL = "japaneseLegal"
    JAPANESE_DIGITAL_TEN_THOUSAND = "japaneseDigitalTenThousand"
    DECIMAL_ENCLOSED_CIRCLE = "decimalEnclosedCircle"
    DECIMAL_FULL_WIDTH2 = "decimalFullWidth2"
    AIUEO_FULL_WIDTH = "aiueoFullWidth"
    IROHA_FULL_WIDTH = "irohaFullWidth"
    DECIMAL_ZERO = "decimalZero"
    BULLET = "bullet"
    GANADA = "ganada"
    CHOSUNG = "chosung"
    DECIMAL_ENCLOSED_FULLSTOP = "decimalEnclosedFullstop"
    DECIMAL_ENCLOSED_PAREN = "decimalEnclosedParen"
    DECIMAL_ENCLOSED_CIRCLE_CHINESE = "decimalEnclosedCircleChinese"
    IDEOGRAPH_ENCLOSED_CIRCLE = "ideographEnclosedCircle"
    IDEOGRAPH_TRADITIONAL = "ideographTraditional"
    IDEOGRAPH_ZODIAC = "ideographZodiac"
    IDEOGRAPH_ZODIAC_TRADITIONAL = "ideographZodiacTraditional"
    TAIWANESE_COUNTING = "taiwaneseCounting"
    IDEOGRAPH_LEGAL_TRADITIONAL = "ideographLegalTraditional"
    TAIWANESE_COUNTING_THOUSAND = "taiwaneseCountingThousand"
    TAIWANESE_DIGITAL = "taiwaneseDigital"
    CHINESE_COUNTING = "chineseCounting"
    CHINESE_LEGAL_SIMPLIFIED = "chineseLegalSimplified"
    CHINESE_COUNTING_THOUSAND = "chineseCountingThousand"
    KOREAN_DIGITAL = "koreanDigital"
    KOREAN_COUNTING = "koreanCounting"
    KOREAN_LEGAL = "koreanLegal"
    KOREAN_DIGITAL2 = "koreanDigital2"
    VIETNAMESE_COUNTING = "vietnameseCounting"
    RUSSIAN_LOWER = "russianLower"
    RUSSIAN_UPPER = "russianUpper"
    NONE = "none"
    NUMBER_IN_DASH = "numberInDash"
    HEBREW1 = "hebrew1"
    HEBREW2 = "hebrew2"
    ARABIC_ALPHA = "arabicAlpha"
    ARABIC_ABJAD = "arabicAbjad"
    HINDI_VOWELS = "hindiVowels"
    HINDI_CONSONANTS = "hindiConsonants"
    HINDI_NUMBERS = "hindiNumbers"
    HINDI_COUNTING = "hindiCounting"
    THAI_LETTERS = "thaiLetters"
    THAI_NUMBERS = "thaiNumbers"
    THAI_COUNTING = "thaiCounting"
    BAHT_TEXT = "bahtText"
    DOLLAR_TEXT = "dollarText"
    CUSTOM = "custom"


class ChapterSep(XsdEnum):
    HYPHEN = "hyphen"
    PERIOD = "period"
    COLON = "colon"
    EM_DASH = "emDash"
    EN_DASH = "enDash"


# ── Run content ────────────────────────────────────────────────────────────────

class BrType(XsdEnum):
    PAGE = "page"
    COLUMN = "column"
    TEXT_WRAPPING = "textWrapping"


class BrClear(XsdEnum):
    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    ALL = "all"


class PTabAlignment(XsdEnum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class PTabRelativeTo(XsdEnum):
    MARGIN = "margin"
    INDENT = "indent"


class PTabLeader(XsdEnum):
    NONE = "none"
    DOT = "dot"
    HYPHEN = "hyphen"
    UNDERSCORE = "underscore"
    MIDDLE_DOT = "middleDot"


class FldCharType(XsdEnum):
    BEGIN = "begin"
    SEPARATE = "separate"
    END = "end"


class InfoTextType(XsdEnum):
    TEXT = "text"
    AUTO_TEXT = "autoText"


class FFTextType(XsdEnum):
    REGULAR = "regular"
    NUMBER = "number"
    DATE = "date"
    CURRENT_TIME = "currentTime"
    CURRENT_DATE = "currentDate"
    CALCULATED = "calculated"


class RubyAlign(XsdEnum):
    CENTER = "center"
    DISTRIBUTE_LETTER = "distributeLetter"
    DISTRIBUTE_SPACE = "distributeSpace"
    LEFT = "left"
    RIGHT = "right"
    RIGHT_VERTICAL = "rightVertical"


class ObjectDrawAspect(XsdEnum):
    CONTENT = "content"
    ICON = "icon"


class ObjectUpdateMode(XsdEnum):
    ALWAYS = "always"
    ON_CALL = "onCall"


class ProofErrType(XsdEnum):
    SPELLING_START = "spellStart"
    SPELLING_END = "spellEnd"
    GRAMMAR_START = "gramStart"
    GRAMMAR_END = "gramEnd"


class EdGrp(XsdEnum):
    NONE = "none"
    EVERYONE = "everyone"
    ADMINISTRATORS = "administrators"
    CONTRIBUTORS = "contributors"
    EDITORS = "editors"
    OWNERS = "owners"
    CURRENT = "current"


class DisplacedByCustomXml(XsdEnum):
    NEXT = "next"
    PREVIOUS = "prev"


class Direction(XsdEnum):
    LEFT_TO_RIGHT = "ltr"
    RIGHT_TO_LEFT = "rtl"


# ── Structured document tags ───────────────────────────────────────────────────

class Lock(XsdEnum):
    SDT_LOCKED = "sdtLocked"
    CONTENT_LOCKED = "contentLocked"
    UNLOCKED = "unlocked"
    SDT_CONTENT_LOCKED = "sdtContentLocked"


class SdtDateMappingType(XsdEnum):
    TEXT = "text"
    DATE = "date"
    DATE_TIME = "dateTime"


# ── Sections ───────────────────────────────────────────────────────────────────

class SectionMark(XsdEnum):
    NEXT_PAGE = "nextPage"
    NEXT_COLUMN = "nextColumn"
    CONTINUOUS = "continuous"
    EVEN_PAGE = "evenPage"
    ODD_PAGE = "oddPage"


class PageOrientation(XsdEnum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


class PageBorderZOrder(XsdEnum):
    FRONT = "front"
    BACK = "back"


class PageBorderDisplay(XsdEnum):
    ALL_PAGES = "allPages"
    FIRST_PAGE = "firstPage"
    NOT_FIRST_PAGE = "notFirstPage"


class PageBorderOffset(XsdEnum):
    PAGE = "page"
    TEXT = "text"


class LineNumberRestart(XsdEnum):
    NEW_PAGE = "newPage"
    NEW_SECTION = "newSection"
    CONTINUOUS = "continuous"


class FtnPos(XsdEnum):
    PAGE_BOTTOM = "pageBottom"
    BENEATH_TEXT = "beneathText"
    SECTION_END = "sectEnd"
    DOCUMENT_END = "docEnd"


class EdnPos(XsdEnum):
    SECTION_END = "sectEnd"
    DOCUMENT_END = "docEnd"


class RestartNumber(XsdEnum):
    CONTINUOUS = "continuous"
    EACH_SECTION = "eachSect"
    EACH_PAGE = "eachPage"


class DocGridType(XsdEnum):
    DEFAULT = "default"
    LINES = "lines"
    LINES_AND_CHARS = "linesAndChars"
    SNAP_TO_CHARS = "snapToChars"


class HdrFtr(XsdEnum):
    EVEN = "even"
    DEFAULT = "default"
    FIRST = "first"
