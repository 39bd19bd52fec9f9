"""
Emoji symbol tables (Emoji 15.1).

Generated by ``emoji-table generate`` from emoji-test.txt. Do not edit by
hand; regenerate instead.
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from emoji_table.model import EmojiCategory, SkinTone

EMOJI_VERSION: Final[str] = '15.1'


class Emoji(str, Enum):
    """Every fully-qualified emoji, valued by its canonical glyph sequence."""

    GRINNING_FACE = '\U0001f600'  # grinning face
    GRINNING_FACE_WITH_BIG_EYES = '\U0001f603'  # grinning face with big eyes
    GRINNING_FACE_WITH_SMILING_EYES = '\U0001f604'  # grinning face with smiling eyes
    BEAMING_FACE_WITH_SMILING_EYES = '\U0001f601'  # beaming face with smiling eyes
    GRINNING_SQUINTING_FACE = '\U0001f606'  # grinning squinting face
    GRINNING_FACE_WITH_SWEAT = '\U0001f605'  # grinning face with sweat
    ROLLING_ON_THE_FLOOR_LAUGHING = '\U0001f923'  # rolling on the floor laughing
    FACE_WITH_TEARS_OF_JOY = '\U0001f602'  # face with tears of joy
    SLIGHTLY_SMILING_FACE = '\U0001f642'  # slightly smiling face
    UPSIDE_DOWN_FACE = '\U0001f643'  # upside-down face
    MELTING_FACE = '\U0001fae0'  # melting face
    WINKING_FACE = '\U0001f609'  # winking face
    SMILING_FACE_WITH_SMILING_EYES = '\U0001f60a'  # smiling face with smiling eyes
    SMILING_FACE_WITH_HALO = '\U0001f607'  # smiling face with halo
    SMILING_FACE_WITH_HEARTS = '\U0001f970'  # smiling face with hearts
    SMILING_FACE_WITH_HEART_EYES = '\U0001f60d'  # smiling face with heart-eyes
    STAR_STRUCK = '\U0001f929'  # star-struck
    FACE_BLOWING_A_KISS = '\U0001f618'  # face blowing a kiss
    KISSING_FACE = '\U0001f617'  # kissing face
    SMILING_FACE = '\u263a\ufe0f'  # smiling face
    KISSING_FACE_WITH_CLOSED_EYES = '\U0001f61a'  # kissing face with closed eyes
    KISSING_FACE_WITH_SMILING_EYES = '\U0001f619'  # kissing face with smiling eyes
    SMILING_FACE_WITH_TEAR = '\U0001f972'  # smiling face with tear
    FACE_SAVORING_FOOD = '\U0001f60b'  # face savoring food
    FACE_WITH_TONGUE = '\U0001f61b'  # face with tongue
    WINKING_FACE_WITH_TONGUE = '\U0001f61c'  # winking face with tongue
    ZANY_FACE = '\U0001f92a'  # zany face
    SQUINTING_FACE_WITH_TONGUE = '\U0001f61d'  # squinting face with tongue
    MONEY_MOUTH_FACE = '\U0001f911'  # money-mouth face
    SMILING_FACE_WITH_OPEN_HANDS = '\U0001f917'  # smiling face with open hands
    FACE_WITH_HAND_OVER_MOUTH = '\U0001f92d'  # face with hand over mouth
    FACE_WITH_OPEN_EYES_AND_HAND_OVER_MOUTH = '\U0001fae2'  # face with open eyes and hand over mouth
    FACE_WITH_PEEKING_EYE = '\U0001fae3'  # face with peeking eye
    SHUSHING_FACE = '\U0001f92b'  # shushing face
    THINKING_FACE = '\U0001f914'  # thinking face
    SALUTING_FACE = '\U0001fae1'  # saluting face
    ZIPPER_MOUTH_FACE = '\U0001f910'  # zipper-mouth face
    FACE_WITH_RAISED_EYEBROW = '\U0001f928'  # face with raised eyebrow
    NEUTRAL_FACE = '\U0001f610'  # neutral face
    EXPRESSIONLESS_FACE = '\U0001f611'  # expressionless face
    FACE_WITHOUT_MOUTH = '\U0001f636'  # face without mouth
    DOTTED_LINE_FACE = '\U0001fae5'  # dotted line face
    FACE_IN_CLOUDS = '\U0001f636\u200d\U0001f32b\ufe0f'  # face in clouds
    SMIRKING_FACE = '\U0001f60f'  # smirking face
    UNAMUSED_FACE = '\U0001f612'  # unamused face
    FACE_WITH_ROLLING_EYES = '\U0001f644'  # face with rolling eyes
    GRIMACING_FACE = '\U0001f62c'  # grimacing face
    FACE_EXHALING = '\U0001f62e\u200d\U0001f4a8'  # face exhaling
    LYING_FACE = '\U0001f925'  # lying face
    SHAKING_FACE = '\U0001fae8'  # shaking face
    HEAD_SHAKING_HORIZONTALLY = '\U0001f642\u200d\u2194\ufe0f'  # head shaking horizontally
    HEAD_SHAKING_VERTICALLY = '\U0001f642\u200d\u2195\ufe0f'  # head shaking vertically
    RELIEVED_FACE = '\U0001f60c'  # relieved face
    PENSIVE_FACE = '\U0001f614'  # pensive face
    SLEEPY_FACE = '\U0001f62a'  # sleepy face
    DROOLING_FACE = '\U0001f924'  # drooling face
    SLEEPING_FACE = '\U0001f634'  # sleeping face
    FACE_WITH_MEDICAL_MASK = '\U0001f637'  # face with medical mask
    FACE_WITH_THERMOMETER = '\U0001f912'  # face with thermometer
    FACE_WITH_HEAD_BANDAGE = '\U0001f915'  # face with head-bandage
    NAUSEATED_FACE = '\U0001f922'  # nauseated face
    FACE_VOMITING = '\U0001f92e'  # face vomiting
    SNEEZING_FACE = '\U0001f927'  # sneezing face
    HOT_FACE = '\U0001f975'  # hot face
    COLD_FACE = '\U0001f976'  # cold face
    WOOZY_FACE = '\U0001f974'  # woozy face
    FACE_WITH_CROSSED_OUT_EYES = '\U0001f635'  # face with crossed-out eyes
    FACE_WITH_SPIRAL_EYES = '\U0001f635\u200d\U0001f4ab'  # face with spiral eyes
    EXPLODING_HEAD = '\U0001f92f'  # exploding head
    COWBOY_HAT_FACE = '\U0001f920'  # cowboy hat face
    PARTYING_FACE = '\U0001f973'  # partying face
    DISGUISED_FACE = '\U0001f978'  # disguised face
    SMILING_FACE_WITH_SUNGLASSES = '\U0001f60e'  # smiling face with sunglasses
    NERD_FACE = '\U0001f913'  # nerd face
    FACE_WITH_MONOCLE = '\U0001f9d0'  # face with monocle
    CONFUSED_FACE = '\U0001f615'  # confused face
    FACE_WITH_DIAGONAL_MOUTH = '\U0001fae4'  # face with diagonal mouth
    WORRIED_FACE = '\U0001f61f'  # worried face
    SLIGHTLY_FROWNING_FACE = '\U0001f641'  # slightly frowning face
    FROWNING_FACE = '\u2639\ufe0f'  # frowning face
    FACE_WITH_OPEN_MOUTH = '\U0001f62e'  # face with open mouth
    HUSHED_FACE = '\U0001f62f'  # hushed face
    ASTONISHED_FACE = '\U0001f632'  # astonished face
    FLUSHED_FACE = '\U0001f633'  # flushed face
    PLEADING_FACE = '\U0001f97a'  # pleading face
    FACE_HOLDING_BACK_TEARS = '\U0001f979'  # face holding back tears
    FROWNING_FACE_WITH_OPEN_MOUTH = '\U0001f626'  # frowning face with open mouth
    ANGUISHED_FACE = '\U0001f627'  # anguished face
    FEARFUL_FACE = '\U0001f628'  # fearful face
    ANXIOUS_FACE_WITH_SWEAT = '\U0001f630'  # anxious face with sweat
    SAD_BUT_RELIEVED_FACE = '\U0001f625'  # sad but relieved face
    CRYING_FACE = '\U0001f622'  # crying face
    LOUDLY_CRYING_FACE = '\U0001f62d'  # loudly crying face
    FACE_SCREAMING_IN_FEAR = '\U0001f631'  # face screaming in fear
    CONFOUNDED_FACE = '\U0001f616'  # confounded face
    PERSEVERING_FACE = '\U0001f623'  # persevering face
    DISAPPOINTED_FACE = '\U0001f61e'  # disappointed face
    DOWNCAST_FACE_WITH_SWEAT = '\U0001f613'  # downcast face with sweat
    WEARY_FACE = '\U0001f629'  # weary face
    TIRED_FACE = '\U0001f62b'  # tired face
    YAWNING_FACE = '\U0001f971'  # yawning face
    FACE_WITH_STEAM_FROM_NOSE = '\U0001f624'  # face with steam from nose
    ENRAGED_FACE = '\U0001f621'  # enraged face
    ANGRY_FACE = '\U0001f620'  # angry face
    FACE_WITH_SYMBOLS_ON_MOUTH = '\U0001f92c'  # face with symbols on mouth
    SMILING_FACE_WITH_HORNS = '\U0001f608'  # smiling face with horns
    ANGRY_FACE_WITH_HORNS = '\U0001f47f'  # angry face with horns
    SKULL = '\U0001f480'  # skull
    SKULL_AND_CROSSBONES = '\u2620\ufe0f'  # skull and crossbones
    PILE_OF_POO = '\U0001f4a9'  # pile of poo
    CLOWN_FACE = '\U0001f921'  # clown face
    OGRE = '\U0001f479'  # ogre
    GOBLIN = '\U0001f47a'  # goblin
    GHOST = '\U0001f47b'  # ghost
    ALIEN = '\U0001f47d'  # alien
    ALIEN_MONSTER = '\U0001f47e'  # alien monster
    ROBOT = '\U0001f916'  # robot
    GRINNING_CAT = '\U0001f63a'  # grinning cat
    GRINNING_CAT_WITH_SMILING_EYES = '\U0001f638'  # grinning cat with smiling eyes
    CAT_WITH_TEARS_OF_JOY = '\U0001f639'  # cat with tears of joy
    SMILING_CAT_WITH_HEART_EYES = '\U0001f63b'  # smiling cat with heart-eyes
    CAT_WITH_WRY_SMILE = '\U0001f63c'  # cat with wry smile
    KISSING_CAT = '\U0001f63d'  # kissing cat
    WEARY_CAT = '\U0001f640'  # weary cat
    CRYING_CAT = '\U0001f63f'  # crying cat
    POUTING_CAT = '\U0001f63e'  # pouting cat
    SEE_NO_EVIL_MONKEY = '\U0001f648'  # see-no-evil monkey
    HEAR_NO_EVIL_MONKEY = '\U0001f649'  # hear-no-evil monkey
    SPEAK_NO_EVIL_MONKEY = '\U0001f64a'  # speak-no-evil monkey
    LOVE_LETTER = '\U0001f48c'  # love letter
    HEART_WITH_ARROW = '\U0001f498'  # heart with arrow
    HEART_WITH_RIBBON = '\U0001f49d'  # heart with ribbon
    SPARKLING_HEART = '\U0001f496'  # sparkling heart
    GROWING_HEART = '\U0001f497'  # growing heart
    BEATING_HEART = '\U0001f493'  # beating heart
    REVOLVING_HEARTS = '\U0001f49e'  # revolving hearts
    TWO_HEARTS = '\U0001f495'  # two hearts
    HEART_DECORATION = '\U0001f49f'  # heart decoration
    HEART_EXCLAMATION = '\u2763\ufe0f'  # heart exclamation
    BROKEN_HEART = '\U0001f494'  # broken heart
    HEART_ON_FIRE = '\u2764\ufe0f\u200d\U0001f525'  # heart on fire
    MENDING_HEART = '\u2764\ufe0f\u200d\U0001fa79'  # mending heart
    RED_HEART = '\u2764\ufe0f'  # red heart
    PINK_HEART = '\U0001fa77'  # pink heart
    ORANGE_HEART = '\U0001f9e1'  # orange heart
    YELLOW_HEART = '\U0001f49b'  # yellow heart
    GREEN_HEART = '\U0001f49a'  # green heart
    BLUE_HEART = '\U0001f499'  # blue heart
    LIGHT_BLUE_HEART = '\U0001fa75'  # light blue heart
    PURPLE_HEART = '\U0001f49c'  # purple heart
    BROWN_HEART = '\U0001f90e'  # brown heart
    BLACK_HEART = '\U0001f5a4'  # black heart
    GREY_HEART = '\U0001fa76'  # grey heart
    WHITE_HEART = '\U0001f90d'  # white heart
    KISS_MARK = '\U0001f48b'  # kiss mark
    HUNDRED_POINTS = '\U0001f4af'  # hundred points
    ANGER_SYMBOL = '\U0001f4a2'  # anger symbol
    COLLISION = '\U0001f4a5'  # collision
    DIZZY = '\U0001f4ab'  # dizzy
    SWEAT_DROPLETS = '\U0001f4a6'  # sweat droplets
    DASHING_AWAY = '\U0001f4a8'  # dashing away
    HOLE = '\U0001f573\ufe0f'  # hole
    SPEECH_BALLOON = '\U0001f4ac'  # speech balloon
    EYE_IN_SPEECH_BUBBLE = '\U0001f441\ufe0f\u200d\U0001f5e8\ufe0f'  # eye in speech bubble
    LEFT_SPEECH_BUBBLE = '\U0001f5e8\ufe0f'  # left speech bubble
    RIGHT_ANGER_BUBBLE = '\U0001f5ef\ufe0f'  # right anger bubble
    THOUGHT_BALLOON = '\U0001f4ad'  # thought balloon
    ZZZ = '\U0001f4a4'  # ZZZ
    WAVING_HAND = '\U0001f44b'  # waving hand
    RAISED_BACK_OF_HAND = '\U0001f91a'  # raised back of hand
    HAND_WITH_FINGERS_SPLAYED = '\U0001f590\ufe0f'  # hand with fingers splayed
    RAISED_HAND = '\u270b'  # raised hand
    VULCAN_SALUTE = '\U0001f596'  # vulcan salute
    RIGHTWARDS_HAND = '\U0001faf1'  # rightwards hand
    LEFTWARDS_HAND = '\U0001faf2'  # leftwards hand
    PALM_DOWN_HAND = '\U0001faf3'  # palm down hand
    PALM_UP_HAND = '\U0001faf4'  # palm up hand
    LEFTWARDS_PUSHING_HAND = '\U0001faf7'  # leftwards pushing hand
    RIGHTWARDS_PUSHING_HAND = '\U0001faf8'  # rightwards pushing hand
    OK_HAND = '\U0001f44c'  # OK hand
    PINCHED_FINGERS = '\U0001f90c'  # pinched fingers
    PINCHING_HAND = '\U0001f90f'  # pinching hand
    VICTORY_HAND = '\u270c\ufe0f'  # victory hand
    CROSSED_FINGERS = '\U0001f91e'  # crossed fingers
    HAND_WITH_INDEX_FINGER_AND_THUMB_CROSSED = '\U0001faf0'  # hand with index finger and thumb crossed
    LOVE_YOU_GESTURE = '\U0001f91f'  # love-you gesture
    SIGN_OF_THE_HORNS = '\U0001f918'  # sign of the horns
    CALL_ME_HAND = '\U0001f919'  # call me hand
    BACKHAND_INDEX_POINTING_LEFT = '\U0001f448'  # backhand index pointing left
    BACKHAND_INDEX_POINTING_RIGHT = '\U0001f449'  # backhand index pointing right
    BACKHAND_INDEX_POINTING_UP = '\U0001f446'  # backhand index pointing up
    MIDDLE_FINGER = '\U0001f595'  # middle finger
    BACKHAND_INDEX_POINTING_DOWN = '\U0001f447'  # backhand index pointing down
    INDEX_POINTING_UP = '\u261d\ufe0f'  # index pointing up
    INDEX_POINTING_AT_THE_VIEWER = '\U0001faf5'  # index pointing at the viewer
    THUMBS_UP = '\U0001f44d'  # thumbs up
    THUMBS_DOWN = '\U0001f44e'  # thumbs down
    RAISED_FIST = '\u270a'  # raised fist
    ONCOMING_FIST = '\U0001f44a'  # oncoming fist
    LEFT_FACING_FIST = '\U0001f91b'  # left-facing fist
    RIGHT_FACING_FIST = '\U0001f91c'  # right-facing fist
    CLAPPING_HANDS = '\U0001f44f'  # clapping hands
    RAISING_HANDS = '\U0001f64c'  # raising hands
    HEART_HANDS = '\U0001faf6'  # heart hands
    OPEN_HANDS = '\U0001f450'  # open hands
    PALMS_UP_TOGETHER = '\U0001f932'  # palms up together
    HANDSHAKE = '\U0001f91d'  # handshake
    FOLDED_HANDS = '\U0001f64f'  # folded hands
    WRITING_HAND = '\u270d\ufe0f'  # writing hand
    NAIL_POLISH = '\U0001f485'  # nail polish
    SELFIE = '\U0001f933'  # selfie
    FLEXED_BICEPS = '\U0001f4aa'  # flexed biceps
    MECHANICAL_ARM = '\U0001f9be'  # mechanical arm
    MECHANICAL_LEG = '\U0001f9bf'  # mechanical leg
    LEG = '\U0001f9b5'  # leg
    FOOT = '\U0001f9b6'  # foot
    EAR = '\U0001f442'  # ear
    EAR_WITH_HEARING_AID = '\U0001f9bb'  # ear with hearing aid
    NOSE = '\U0001f443'  # nose
    BRAIN = '\U0001f9e0'  # brain
    ANATOMICAL_HEART = '\U0001fac0'  # anatomical heart
    LUNGS = '\U0001fac1'  # lungs
    TOOTH = '\U0001f9b7'  # tooth
    BONE = '\U0001f9b4'  # bone
    EYES = '\U0001f440'  # eyes
    EYE = '\U0001f441\ufe0f'  # eye
    TONGUE = '\U0001f445'  # tongue
    MOUTH = '\U0001f444'  # mouth
    BITING_LIP = '\U0001fae6'  # biting lip
    BABY = '\U0001f476'  # baby
    CHILD = '\U0001f9d2'  # child
    BOY = '\U0001f466'  # boy
    GIRL = '\U0001f467'  # girl
    PERSON = '\U0001f9d1'  # person
    PERSON_BLOND_HAIR = '\U0001f471'  # person: blond hair
    MAN = '\U0001f468'  # man
    PERSON_BEARD = '\U0001f9d4'  # person: beard
    MAN_BEARD = '\U0001f9d4\u200d\u2642\ufe0f'  # man: beard
    WOMAN_BEARD = '\U0001f9d4\u200d\u2640\ufe0f'  # woman: beard
    MAN_RED_HAIR = '\U0001f468\u200d\U0001f9b0'  # man: red hair
    MAN_CURLY_HAIR = '\U0001f468\u200d\U0001f9b1'  # man: curly hair
    MAN_WHITE_HAIR = '\U0001f468\u200d\U0001f9b3'  # man: white hair
    MAN_BALD = '\U0001f468\u200d\U0001f9b2'  # man: bald
    WOMAN = '\U0001f469'  # woman
    WOMAN_RED_HAIR = '\U0001f469\u200d\U0001f9b0'  # woman: red hair
    PERSON_RED_HAIR = '\U0001f9d1\u200d\U0001f9b0'  # person: red hair
    WOMAN_CURLY_HAIR = '\U0001f469\u200d\U0001f9b1'  # woman: curly hair
    PERSON_CURLY_HAIR = '\U0001f9d1\u200d\U0001f9b1'  # person: curly hair
    WOMAN_WHITE_HAIR = '\U0001f469\u200d\U0001f9b3'  # woman: white hair
    PERSON_WHITE_HAIR = '\U0001f9d1\u200d\U0001f9b3'  # person: white hair
    WOMAN_BALD = '\U0001f469\u200d\U0001f9b2'  # woman: bald
    PERSON_BALD = '\U0001f9d1\u200d\U0001f9b2'  # person: bald
    WOMAN_BLOND_HAIR = '\U0001f471\u200d\u2640\ufe0f'  # woman: blond hair
    MAN_BLOND_HAIR = '\U0001f471\u200d\u2642\ufe0f'  # man: blond hair
    OLDER_PERSON = '\U0001f9d3'  # older person
    OLD_MAN = '\U0001f474'  # old man
    OLD_WOMAN = '\U0001f475'  # old woman
    PERSON_FROWNING = '\U0001f64d'  # person frowning
    MAN_FROWNING = '\U0001f64d\u200d\u2642\ufe0f'  # man frowning
    WOMAN_FROWNING = '\U0001f64d\u200d\u2640\ufe0f'  # woman frowning
    PERSON_POUTING = '\U0001f64e'  # person pouting
    MAN_POUTING = '\U0001f64e\u200d\u2642\ufe0f'  # man pouting
    WOMAN_POUTING = '\U0001f64e\u200d\u2640\ufe0f'  # woman pouting
    PERSON_GESTURING_NO = '\U0001f645'  # person gesturing NO
    MAN_GESTURING_NO = '\U0001f645\u200d\u2642\ufe0f'  # man gesturing NO
    WOMAN_GESTURING_NO = '\U0001f645\u200d\u2640\ufe0f'  # woman gesturing NO
    PERSON_GESTURING_OK = '\U0001f646'  # person gesturing OK
    MAN_GESTURING_OK = '\U0001f646\u200d\u2642\ufe0f'  # man gesturing OK
    WOMAN_GESTURING_OK = '\U0001f646\u200d\u2640\ufe0f'  # woman gesturing OK
    PERSON_TIPPING_HAND = '\U0001f481'  # person tipping hand
    MAN_TIPPING_HAND = '\U0001f481\u200d\u2642\ufe0f'  # man tipping hand
    WOMAN_TIPPING_HAND = '\U0001f481\u200d\u2640\ufe0f'  # woman tipping hand
    PERSON_RAISING_HAND = '\U0001f64b'  # person raising hand
    MAN_RAISING_HAND = '\U0001f64b\u200d\u2642\ufe0f'  # man raising hand
    WOMAN_RAISING_HAND = '\U0001f64b\u200d\u2640\ufe0f'  # woman raising hand
    DEAF_PERSON = '\U0001f9cf'  # deaf person
    DEAF_MAN = '\U0001f9cf\u200d\u2642\ufe0f'  # deaf man
    DEAF_WOMAN = '\U0001f9cf\u200d\u2640\ufe0f'  # deaf woman
    PERSON_BOWING = '\U0001f647'  # person bowing
    MAN_BOWING = '\U0001f647\u200d\u2642\ufe0f'  # man bowing
    WOMAN_BOWING = '\U0001f647\u200d\u2640\ufe0f'  # woman bowing
    PERSON_FACEPALMING = '\U0001f926'  # person facepalming
    MAN_FACEPALMING = '\U0001f926\u200d\u2642\ufe0f'  # man facepalming
    WOMAN_FACEPALMING = '\U0001f926\u200d\u2640\ufe0f'  # woman facepalming
    PERSON_SHRUGGING = '\U0001f937'  # person shrugging
    MAN_SHRUGGING = '\U0001f937\u200d\u2642\ufe0f'  # man shrugging
    WOMAN_SHRUGGING = '\U0001f937\u200d\u2640\ufe0f'  # woman shrugging
    HEALTH_WORKER = '\U0001f9d1\u200d\u2695\ufe0f'  # health worker
    MAN_HEALTH_WORKER = '\U0001f468\u200d\u2695\ufe0f'  # man health worker
    WOMAN_HEALTH_WORKER = '\U0001f469\u200d\u2695\ufe0f'  # woman health worker
    STUDENT = '\U0001f9d1\u200d\U0001f393'  # student
    MAN_STUDENT = '\U0001f468\u200d\U0001f393'  # man student
    WOMAN_STUDENT = '\U0001f469\u200d\U0001f393'  # woman student
    TEACHER = '\U0001f9d1\u200d\U0001f3eb'  # teacher
    MAN_TEACHER = '\U0001f468\u200d\U0001f3eb'  # man teacher
    WOMAN_TEACHER = '\U0001f469\u200d\U0001f3eb'  # woman teacher
    JUDGE = '\U0001f9d1\u200d\u2696\ufe0f'  # judge
    MAN_JUDGE = '\U0001f468\u200d\u2696\ufe0f'  # man judge
    WOMAN_JUDGE = '\U0001f469\u200d\u2696\ufe0f'  # woman judge
    FARMER = '\U0001f9d1\u200d\U0001f33e'  # farmer
    MAN_FARMER = '\U0001f468\u200d\U0001f33e'  # man farmer
    WOMAN_FARMER = '\U0001f469\u200d\U0001f33e'  # woman farmer
    COOK = '\U0001f9d1\u200d\U0001f373'  # cook
    MAN_COOK = '\U0001f468\u200d\U0001f373'  # man cook
    WOMAN_COOK = '\U0001f469\u200d\U0001f373'  # woman cook
    MECHANIC = '\U0001f9d1\u200d\U0001f527'  # mechanic
    MAN_MECHANIC = '\U0001f468\u200d\U0001f527'  # man mechanic
    WOMAN_MECHANIC = '\U0001f469\u200d\U0001f527'  # woman mechanic
    FACTORY_WORKER = '\U0001f9d1\u200d\U0001f3ed'  # factory worker
    MAN_FACTORY_WORKER = '\U0001f468\u200d\U0001f3ed'  # man factory worker
    WOMAN_FACTORY_WORKER = '\U0001f469\u200d\U0001f3ed'  # woman factory worker
    OFFICE_WORKER = '\U0001f9d1\u200d\U0001f4bc'  # office worker
    MAN_OFFICE_WORKER = '\U0001f468\u200d\U0001f4bc'  # man office worker
    WOMAN_OFFICE_WORKER = '\U0001f469\u200d\U0001f4bc'  # woman office worker
    SCIENTIST = '\U0001f9d1\u200d\U0001f52c'  # scientist
    MAN_SCIENTIST = '\U0001f468\u200d\U0001f52c'  # man scientist
    WOMAN_SCIENTIST = '\U0001f469\u200d\U0001f52c'  # woman scientist
    TECHNOLOGIST = '\U0001f9d1\u200d\U0001f4bb'  # technologist
    MAN_TECHNOLOGIST = '\U0001f468\u200d\U0001f4bb'  # man technologist
    WOMAN_TECHNOLOGIST = '\U0001f469\u200d\U0001f4bb'  # woman technologist
    SINGER = '\U0001f9d1\u200d\U0001f3a4'  # singer
    MAN_SINGER = '\U0001f468\u200d\U0001f3a4'  # man singer
    WOMAN_SINGER = '\U0001f469\u200d\U0001f3a4'  # woman singer
    ARTIST = '\U0001f9d1\u200d\U0001f3a8'  # artist
    MAN_ARTIST = '\U0001f468\u200d\U0001f3a8'  # man artist
    WOMAN_ARTIST = '\U0001f469\u200d\U0001f3a8'  # woman artist
    PILOT = '\U0001f9d1\u200d\u2708\ufe0f'  # pilot
    MAN_PILOT = '\U0001f468\u200d\u2708\ufe0f'  # man pilot
    WOMAN_PILOT = '\U0001f469\u200d\u2708\ufe0f'  # woman pilot
    ASTRONAUT = '\U0001f9d1\u200d\U0001f680'  # astronaut
    MAN_ASTRONAUT = '\U0001f468\u200d\U0001f680'  # man astronaut
    WOMAN_ASTRONAUT = '\U0001f469\u200d\U0001f680'  # woman astronaut
    FIREFIGHTER = '\U0001f9d1\u200d\U0001f692'  # firefighter
    MAN_FIREFIGHTER = '\U0001f468\u200d\U0001f692'  # man firefighter
    WOMAN_FIREFIGHTER = '\U0001f469\u200d\U0001f692'  # woman firefighter
    POLICE_OFFICER = '\U0001f46e'  # police officer
    MAN_POLICE_OFFICER = '\U0001f46e\u200d\u2642\ufe0f'  # man police officer
    WOMAN_POLICE_OFFICER = '\U0001f46e\u200d\u2640\ufe0f'  # woman police officer
    DETECTIVE = '\U0001f575\ufe0f'  # detective
    MAN_DETECTIVE = '\U0001f575\ufe0f\u200d\u2642\ufe0f'  # man detective
    WOMAN_DETECTIVE = '\U0001f575\ufe0f\u200d\u2640\ufe0f'  # woman detective
    GUARD = '\U0001f482'  # guard
    MAN_GUARD = '\U0001f482\u200d\u2642\ufe0f'  # man guard
    WOMAN_GUARD = '\U0001f482\u200d\u2640\ufe0f'  # woman guard
    NINJA = '\U0001f977'  # ninja
    CONSTRUCTION_WORKER = '\U0001f477'  # construction worker
    MAN_CONSTRUCTION_WORKER = '\U0001f477\u200d\u2642\ufe0f'  # man construction worker
    WOMAN_CONSTRUCTION_WORKER = '\U0001f477\u200d\u2640\ufe0f'  # woman construction worker
    PERSON_WITH_CROWN = '\U0001fac5'  # person with crown
    PRINCE = '\U0001f934'  # prince
    PRINCESS = '\U0001f478'  # princess
    PERSON_WEARING_TURBAN = '\U0001f473'  # person wearing turban
    MAN_WEARING_TURBAN = '\U0001f473\u200d\u2642\ufe0f'  # man wearing turban
    WOMAN_WEARING_TURBAN = '\U0001f473\u200d\u2640\ufe0f'  # woman wearing turban
    PERSON_WITH_SKULLCAP = '\U0001f472'  # person with skullcap
    WOMAN_WITH_HEADSCARF = '\U0001f9d5'  # woman with headscarf
    PERSON_IN_TUXEDO = '\U0001f935'  # person in tuxedo
    MAN_IN_TUXEDO = '\U0001f935\u200d\u2642\ufe0f'  # man in tuxedo
    WOMAN_IN_TUXEDO = '\U0001f935\u200d\u2640\ufe0f'  # woman in tuxedo
    PERSON_WITH_VEIL = '\U0001f470'  # person with veil
    MAN_WITH_VEIL = '\U0001f470\u200d\u2642\ufe0f'  # man with veil
    WOMAN_WITH_VEIL = '\U0001f470\u200d\u2640\ufe0f'  # woman with veil
    PREGNANT_WOMAN = '\U0001f930'  # pregnant woman
    PREGNANT_MAN = '\U0001fac3'  # pregnant man
    PREGNANT_PERSON = '\U0001fac4'  # pregnant person
    BREAST_FEEDING = '\U0001f931'  # breast-feeding
    WOMAN_FEEDING_BABY = '\U0001f469\u200d\U0001f37c'  # woman feeding baby
    MAN_FEEDING_BABY = '\U0001f468\u200d\U0001f37c'  # man feeding baby
    PERSON_FEEDING_BABY = '\U0001f9d1\u200d\U0001f37c'  # person feeding baby
    BABY_ANGEL = '\U0001f47c'  # baby angel
    SANTA_CLAUS = '\U0001f385'  # Santa Claus
    MRS_CLAUS = '\U0001f936'  # Mrs. Claus
    MX_CLAUS = '\U0001f9d1\u200d\U0001f384'  # mx claus
    SUPERHERO = '\U0001f9b8'  # superhero
    MAN_SUPERHERO = '\U0001f9b8\u200d\u2642\ufe0f'  # man superhero
    WOMAN_SUPERHERO = '\U0001f9b8\u200d\u2640\ufe0f'  # woman superhero
    SUPERVILLAIN = '\U0001f9b9'  # supervillain
    MAN_SUPERVILLAIN = '\U0001f9b9\u200d\u2642\ufe0f'  # man supervillain
    WOMAN_SUPERVILLAIN = '\U0001f9b9\u200d\u2640\ufe0f'  # woman supervillain
    MAGE = '\U0001f9d9'  # mage
    MAN_MAGE = '\U0001f9d9\u200d\u2642\ufe0f'  # man mage
    WOMAN_MAGE = '\U0001f9d9\u200d\u2640\ufe0f'  # woman mage
    FAIRY = '\U0001f9da'  # fairy
    MAN_FAIRY = '\U0001f9da\u200d\u2642\ufe0f'  # man fairy
    WOMAN_FAIRY = '\U0001f9da\u200d\u2640\ufe0f'  # woman fairy
    VAMPIRE = '\U0001f9db'  # vampire
    MAN_VAMPIRE = '\U0001f9db\u200d\u2642\ufe0f'  # man vampire
    WOMAN_VAMPIRE = '\U0001f9db\u200d\u2640\ufe0f'  # woman vampire
    MERPERSON = '\U0001f9dc'  # merperson
    MERMAN = '\U0001f9dc\u200d\u2642\ufe0f'  # merman
    MERMAID = '\U0001f9dc\u200d\u2640\ufe0f'  # mermaid
    ELF = '\U0001f9dd'  # elf
    MAN_ELF = '\U0001f9dd\u200d\u2642\ufe0f'  # man elf
    WOMAN_ELF = '\U0001f9dd\u200d\u2640\ufe0f'  # woman elf
    GENIE = '\U0001f9de'  # genie
    MAN_GENIE = '\U0001f9de\u200d\u2642\ufe0f'  # man genie
    WOMAN_GENIE = '\U0001f9de\u200d\u2640\ufe0f'  # woman genie
    ZOMBIE = '\U0001f9df'  # zombie
    MAN_ZOMBIE = '\U0001f9df\u200d\u2642\ufe0f'  # man zombie
    WOMAN_ZOMBIE = '\U0001f9df\u200d\u2640\ufe0f'  # woman zombie
    TROLL = '\U0001f9cc'  # troll
    PERSON_GETTING_MASSAGE = '\U0001f486'  # person getting massage
    MAN_GETTING_MASSAGE = '\U0001f486\u200d\u2642\ufe0f'  # man getting massage
    WOMAN_GETTING_MASSAGE = '\U0001f486\u200d\u2640\ufe0f'  # woman getting massage
    PERSON_GETTING_HAIRCUT = '\U0001f487'  # person getting haircut
    MAN_GETTING_HAIRCUT = '\U0001f487\u200d\u2642\ufe0f'  # man getting haircut
    WOMAN_GETTING_HAIRCUT = '\U0001f487\u200d\u2640\ufe0f'  # woman getting haircut
    PERSON_WALKING = '\U0001f6b6'  # person walking
    MAN_WALKING = '\U0001f6b6\u200d\u2642\ufe0f'  # man walking
    WOMAN_WALKING = '\U0001f6b6\u200d\u2640\ufe0f'  # woman walking
    PERSON_WALKING_FACING_RIGHT = '\U0001f6b6\u200d\u27a1\ufe0f'  # person walking facing right
    WOMAN_WALKING_FACING_RIGHT = '\U0001f6b6\u200d\u2640\ufe0f\u200d\u27a1\ufe0f'  # woman walking facing right
    MAN_WALKING_FACING_RIGHT = '\U0001f6b6\u200d\u2642\ufe0f\u200d\u27a1\ufe0f'  # man walking facing right
    PERSON_STANDING = '\U0001f9cd'  # person standing
    MAN_STANDING = '\U0001f9cd\u200d\u2642\ufe0f'  # man standing
    WOMAN_STANDING = '\U0001f9cd\u200d\u2640\ufe0f'  # woman standing
    PERSON_KNEELING = '\U0001f9ce'  # person kneeling
    MAN_KNEELING = '\U0001f9ce\u200d\u2642\ufe0f'  # man kneeling
    WOMAN_KNEELING = '\U0001f9ce\u200d\u2640\ufe0f'  # woman kneeling
    PERSON_KNEELING_FACING_RIGHT = '\U0001f9ce\u200d\u27a1\ufe0f'  # person kneeling facing right
    WOMAN_KNEELING_FACING_RIGHT = '\U0001f9ce\u200d\u2640\ufe0f\u200d\u27a1\ufe0f'  # woman kneeling facing right
    MAN_KNEELING_FACING_RIGHT = '\U0001f9ce\u200d\u2642\ufe0f\u200d\u27a1\ufe0f'  # man kneeling facing right
    PERSON_WITH_WHITE_CANE = '\U0001f9d1\u200d\U0001f9af'  # person with white cane
    PERSON_WITH_WHITE_CANE_FACING_RIGHT = '\U0001f9d1\u200d\U0001f9af\u200d\u27a1\ufe0f'  # person with white cane facing right
    MAN_WITH_WHITE_CANE = '\U0001f468\u200d\U0001f9af'  # man with white cane
    MAN_WITH_WHITE_CANE_FACING_RIGHT = '\U0001f468\u200d\U0001f9af\u200d\u27a1\ufe0f'  # man with white cane facing right
    WOMAN_WITH_WHITE_CANE = '\U0001f469\u200d\U0001f9af'  # woman with white cane
    WOMAN_WITH_WHITE_CANE_FACING_RIGHT = '\U0001f469\u200d\U0001f9af\u200d\u27a1\ufe0f'  # woman with white cane facing right
    PERSON_IN_MOTORIZED_WHEELCHAIR = '\U0001f9d1\u200d\U0001f9bc'  # person in motorized wheelchair
    PERSON_IN_MOTORIZED_WHEELCHAIR_FACING_RIGHT = '\U0001f9d1\u200d\U0001f9bc\u200d\u27a1\ufe0f'  # person in motorized wheelchair facing right
    MAN_IN_MOTORIZED_WHEELCHAIR = '\U0001f468\u200d\U0001f9bc'  # man in motorized wheelchair
    MAN_IN_MOTORIZED_WHEELCHAIR_FACING_RIGHT = '\U0001f468\u200d\U0001f9bc\u200d\u27a1\ufe0f'  # man in motorized wheelchair facing right
    WOMAN_IN_MOTORIZED_WHEELCHAIR = '\U0001f469\u200d\U0001f9bc'  # woman in motorized wheelchair
    WOMAN_IN_MOTORIZED_WHEELCHAIR_FACING_RIGHT = '\U0001f469\u200d\U0001f9bc\u200d\u27a1\ufe0f'  # woman in motorized wheelchair facing right
    PERSON_IN_MANUAL_WHEELCHAIR = '\U0001f9d1\u200d\U0001f9bd'  # person in manual wheelchair
    PERSON_IN_MANUAL_WHEELCHAIR_FACING_RIGHT = '\U0001f9d1\u200d\U0001f9bd\u200d\u27a1\ufe0f'  # person in manual wheelchair facing right
    MAN_IN_MANUAL_WHEELCHAIR = '\U0001f468\u200d\U0001f9bd'  # man in manual wheelchair
    MAN_IN_MANUAL_WHEELCHAIR_FACING_RIGHT = '\U0001f468\u200d\U0001f9bd\u200d\u27a1\ufe0f'  # man in manual wheelchair facing right
    WOMAN_IN_MANUAL_WHEELCHAIR = '\U0001f469\u200d\U0001f9bd'  # woman in manual wheelchair
    WOMAN_IN_MANUAL_WHEELCHAIR_FACING_RIGHT = '\U0001f469\u200d\U0001f9bd\u200d\u27a1\ufe0f'  # woman in manual wheelchair facing right
    PERSON_RUNNING = '\U0001f3c3'  # person running
    MAN_RUNNING = '\U0001f3c3\u200d\u2642\ufe0f'  # man running
    WOMAN_RUNNING = '\U0001f3c3\u200d\u2640\ufe0f'  # woman running
    PERSON_RUNNING_FACING_RIGHT = '\U0001f3c3\u200d\u27a1\ufe0f'  # person running facing right
    WOMAN_RUNNING_FACING_RIGHT = '\U0001f3c3\u200d\u2640\ufe0f\u200d\u27a1\ufe0f'  # woman running facing right
    MAN_RUNNING_FACING_RIGHT = '\U0001f3c3\u200d\u2642\ufe0f\u200d\u27a1\ufe0f'  # man running facing right
    WOMAN_DANCING = '\U0001f483'  # woman dancing
    MAN_DANCING = '\U0001f57a'  # man dancing
    PERSON_IN_SUIT_LEVITATING = '\U0001f574\ufe0f'  # person in suit levitating
    PEOPLE_WITH_BUNNY_EARS = '\U0001f46f'  # people with bunny ears
    MEN_WITH_BUNNY_EARS = '\U0001f46f\u200d\u2642\ufe0f'  # men with bunny ears
    WOMEN_WITH_BUNNY_EARS = '\U0001f46f\u200d\u2640\ufe0f'  # women with bunny ears
    PERSON_IN_STEAMY_ROOM = '\U0001f9d6'  # person in steamy room
    MAN_IN_STEAMY_ROOM = '\U0001f9d6\u200d\u2642\ufe0f'  # man in steamy room
    WOMAN_IN_STEAMY_ROOM = '\U0001f9d6\u200d\u2640\ufe0f'  # woman in steamy room
    PERSON_CLIMBING = '\U0001f9d7'  # person climbing
    MAN_CLIMBING = '\U0001f9d7\u200d\u2642\ufe0f'  # man climbing
    WOMAN_CLIMBING = '\U0001f9d7\u200d\u2640\ufe0f'  # woman climbing
    PERSON_FENCING = '\U0001f93a'  # person fencing
    HORSE_RACING = '\U0001f3c7'  # horse racing
    SKIER = '\u26f7\ufe0f'  # skier
    SNOWBOARDER = '\U0001f3c2'  # snowboarder
    PERSON_GOLFING = '\U0001f3cc\ufe0f'  # person golfing
    MAN_GOLFING = '\U0001f3cc\ufe0f\u200d\u2642\ufe0f'  # man golfing
    WOMAN_GOLFING = '\U0001f3cc\ufe0f\u200d\u2640\ufe0f'  # woman golfing
    PERSON_SURFING = '\U0001f3c4'  # person surfing
    MAN_SURFING = '\U0001f3c4\u200d\u2642\ufe0f'  # man surfing
    WOMAN_SURFING = '\U0001f3c4\u200d\u2640\ufe0f'  # woman surfing
    PERSON_ROWING_BOAT = '\U0001f6a3'  # person rowing boat
    MAN_ROWING_BOAT = '\U0001f6a3\u200d\u2642\ufe0f'  # man rowing boat
    WOMAN_ROWING_BOAT = '\U0001f6a3\u200d\u2640\ufe0f'  # woman rowing boat
    PERSON_SWIMMING = '\U0001f3ca'  # person swimming
    MAN_SWIMMING = '\U0001f3ca\u200d\u2642\ufe0f'  # man swimming
    WOMAN_SWIMMING = '\U0001f3ca\u200d\u2640\ufe0f'  # woman swimming
    PERSON_BOUNCING_BALL = '\u26f9\ufe0f'  # person bouncing ball
    MAN_BOUNCING_BALL = '\u26f9\ufe0f\u200d\u2642\ufe0f'  # man bouncing ball
    WOMAN_BOUNCING_BALL = '\u26f9\ufe0f\u200d\u2640\ufe0f'  # woman bouncing ball
    PERSON_LIFTING_WEIGHTS = '\U0001f3cb\ufe0f'  # person lifting weights
    MAN_LIFTING_WEIGHTS = '\U0001f3cb\ufe0f\u200d\u2642\ufe0f'  # man lifting weights
    WOMAN_LIFTING_WEIGHTS = '\U0001f3cb\ufe0f\u200d\u2640\ufe0f'  # woman lifting weights
    PERSON_BIKING = '\U0001f6b4'  # person biking
    MAN_BIKING = '\U0001f6b4\u200d\u2642\ufe0f'  # man biking
    WOMAN_BIKING = '\U0001f6b4\u200d\u2640\ufe0f'  # woman biking
    PERSON_MOUNTAIN_BIKING = '\U0001f6b5'  # person mountain biking
    MAN_MOUNTAIN_BIKING = '\U0001f6b5\u200d\u2642\ufe0f'  # man mountain biking
    WOMAN_MOUNTAIN_BIKING = '\U0001f6b5\u200d\u2640\ufe0f'  # woman mountain biking
    PERSON_CARTWHEELING = '\U0001f938'  # person cartwheeling
    MAN_CARTWHEELING = '\U0001f938\u200d\u2642\ufe0f'  # man cartwheeling
    WOMAN_CARTWHEELING = '\U0001f938\u200d\u2640\ufe0f'  # woman cartwheeling
    PEOPLE_WRESTLING = '\U0001f93c'  # people wrestling
    MEN_WRESTLING = '\U0001f93c\u200d\u2642\ufe0f'  # men wrestling
    WOMEN_WRESTLING = '\U0001f93c\u200d\u2640\ufe0f'  # women wrestling
    PERSON_PLAYING_WATER_POLO = '\U0001f93d'  # person playing water polo
    MAN_PLAYING_WATER_POLO = '\U0001f93d\u200d\u2642\ufe0f'  # man playing water polo
    WOMAN_PLAYING_WATER_POLO = '\U0001f93d\u200d\u2640\ufe0f'  # woman playing water polo
    PERSON_PLAYING_HANDBALL = '\U0001f93e'  # person playing handball
    MAN_PLAYING_HANDBALL = '\U0001f93e\u200d\u2642\ufe0f'  # man playing handball
    WOMAN_PLAYING_HANDBALL = '\U0001f93e\u200d\u2640\ufe0f'  # woman playing handball
    PERSON_JUGGLING = '\U0001f939'  # person juggling
    MAN_JUGGLING = '\U0001f939\u200d\u2642\ufe0f'  # man juggling
    WOMAN_JUGGLING = '\U0001f939\u200d\u2640\ufe0f'  # woman juggling
    PERSON_IN_LOTUS_POSITION = '\U0001f9d8'  # person in lotus position
    MAN_IN_LOTUS_POSITION = '\U0001f9d8\u200d\u2642\ufe0f'  # man in lotus position
    WOMAN_IN_LOTUS_POSITION = '\U0001f9d8\u200d\u2640\ufe0f'  # woman in lotus position
    PERSON_TAKING_BATH = '\U0001f6c0'  # person taking bath
    PERSON_IN_BED = '\U0001f6cc'  # person in bed
    PEOPLE_HOLDING_HANDS = '\U0001f9d1\u200d\U0001f91d\u200d\U0001f9d1'  # people holding hands
    WOMEN_HOLDING_HANDS = '\U0001f46d'  # women holding hands
    WOMAN_AND_MAN_HOLDING_HANDS = '\U0001f46b'  # woman and man holding hands
    MEN_HOLDING_HANDS = '\U0001f46c'  # men holding hands
    KISS = '\U0001f48f'  # kiss
    KISS_WOMAN_MAN = '\U0001f469\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468'  # kiss: woman, man
    KISS_MAN_MAN = '\U0001f468\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468'  # kiss: man, man
    KISS_WOMAN_WOMAN = '\U0001f469\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469'  # kiss: woman, woman
    COUPLE_WITH_HEART = '\U0001f491'  # couple with heart
    COUPLE_WITH_HEART_WOMAN_MAN = '\U0001f469\u200d\u2764\ufe0f\u200d\U0001f468'  # couple with heart: woman, man
    COUPLE_WITH_HEART_MAN_MAN = '\U0001f468\u200d\u2764\ufe0f\u200d\U0001f468'  # couple with heart: man, man
    COUPLE_WITH_HEART_WOMAN_WOMAN = '\U0001f469\u200d\u2764\ufe0f\u200d\U0001f469'  # couple with heart: woman, woman
    FAMILY_MAN_WOMAN_BOY = '\U0001f468\u200d\U0001f469\u200d\U0001f466'  # family: man, woman, boy
    FAMILY_MAN_WOMAN_GIRL = '\U0001f468\u200d\U0001f469\u200d\U0001f467'  # family: man, woman, girl
    FAMILY_MAN_WOMAN_GIRL_BOY = '\U0001f468\u200d\U0001f469\u200d\U0001f467\u200d\U0001f466'  # family: man, woman, girl, boy
    FAMILY_MAN_WOMAN_BOY_BOY = '\U0001f468\u200d\U0001f469\u200d\U0001f466\u200d\U0001f466'  # family: man, woman, boy, boy
    FAMILY_MAN_WOMAN_GIRL_GIRL = '\U0001f468\u200d\U0001f469\u200d\U0001f467\u200d\U0001f467'  # family: man, woman, girl, girl
    FAMILY_MAN_MAN_BOY = '\U0001f468\u200d\U0001f468\u200d\U0001f466'  # family: man, man, boy
    FAMILY_MAN_MAN_GIRL = '\U0001f468\u200d\U0001f468\u200d\U0001f467'  # family: man, man, girl
    FAMILY_MAN_MAN_GIRL_BOY = '\U0001f468\u200d\U0001f468\u200d\U0001f467\u200d\U0001f466'  # family: man, man, girl, boy
    FAMILY_MAN_MAN_BOY_BOY = '\U0001f468\u200d\U0001f468\u200d\U0001f466\u200d\U0001f466'  # family: man, man, boy, boy
    FAMILY_MAN_MAN_GIRL_GIRL = '\U0001f468\u200d\U0001f468\u200d\U0001f467\u200d\U0001f467'  # family: man, man, girl, girl
    FAMILY_WOMAN_WOMAN_BOY = '\U0001f469\u200d\U0001f469\u200d\U0001f466'  # family: woman, woman, boy
    FAMILY_WOMAN_WOMAN_GIRL = '\U0001f469\u200d\U0001f469\u200d\U0001f467'  # family: woman, woman, girl
    FAMILY_WOMAN_WOMAN_GIRL_BOY = '\U0001f469\u200d\U0001f469\u200d\U0001f467\u200d\U0001f466'  # family: woman, woman, girl, boy
    FAMILY_WOMAN_WOMAN_BOY_BOY = '\U0001f469\u200d\U0001f469\u200d\U0001f466\u200d\U0001f466'  # family: woman, woman, boy, boy
    FAMILY_WOMAN_WOMAN_GIRL_GIRL = '\U0001f469\u200d\U0001f469\u200d\U0001f467\u200d\U0001f467'  # family: woman, woman, girl, girl
    FAMILY_MAN_BOY = '\U0001f468\u200d\U0001f466'  # family: man, boy
    FAMILY_MAN_BOY_BOY = '\U0001f468\u200d\U0001f466\u200d\U0001f466'  # family: man, boy, boy
    FAMILY_MAN_GIRL = '\U0001f468\u200d\U0001f467'  # family: man, girl
    FAMILY_MAN_GIRL_BOY = '\U0001f468\u200d\U0001f467\u200d\U0001f466'  # family: man, girl, boy
    FAMILY_MAN_GIRL_GIRL = '\U0001f468\u200d\U0001f467\u200d\U0001f467'  # family: man, girl, girl
    FAMILY_WOMAN_BOY = '\U0001f469\u200d\U0001f466'  # family: woman, boy
    FAMILY_WOMAN_BOY_BOY = '\U0001f469\u200d\U0001f466\u200d\U0001f466'  # family: woman, boy, boy
    FAMILY_WOMAN_GIRL = '\U0001f469\u200d\U0001f467'  # family: woman, girl
    FAMILY_WOMAN_GIRL_BOY = '\U0001f469\u200d\U0001f467\u200d\U0001f466'  # family: woman, girl, boy
    FAMILY_WOMAN_GIRL_GIRL = '\U0001f469\u200d\U0001f467\u200d\U0001f467'  # family: woman, girl, girl
    SPEAKING_HEAD = '\U0001f5e3\ufe0f'  # speaking head
    BUST_IN_SILHOUETTE = '\U0001f464'  # bust in silhouette
    BUSTS_IN_SILHOUETTE = '\U0001f465'  # busts in silhouette
    PEOPLE_HUGGING = '\U0001fac2'  # people hugging
    FAMILY = '\U0001f46a'  # family
    FAMILY_ADULT_ADULT_CHILD = '\U0001f9d1\u200d\U0001f9d1\u200d\U0001f9d2'  # family: adult, adult, child
    FAMILY_ADULT_ADULT_CHILD_CHILD = '\U0001f9d1\u200d\U0001f9d1\u200d\U0001f9d2\u200d\U0001f9d2'  # family: adult, adult, child, child
    FAMILY_ADULT_CHILD = '\U0001f9d1\u200d\U0001f9d2'  # family: adult, child
    FAMILY_ADULT_CHILD_CHILD = '\U0001f9d1\u200d\U0001f9d2\u200d\U0001f9d2'  # family: adult, child, child
    FOOTPRINTS = '\U0001f463'  # footprints
    MONKEY_FACE = '\U0001f435'  # monkey face
    MONKEY = '\U0001f412'  # monkey
    GORILLA = '\U0001f98d'  # gorilla
    ORANGUTAN = '\U0001f9a7'  # orangutan
    DOG_FACE = '\U0001f436'  # dog face
    DOG = '\U0001f415'  # dog
    GUIDE_DOG = '\U0001f9ae'  # guide dog
    SERVICE_DOG = '\U0001f415\u200d\U0001f9ba'  # service dog
    POODLE = '\U0001f429'  # poodle
    WOLF = '\U0001f43a'  # wolf
    FOX = '\U0001f98a'  # fox
    RACCOON = '\U0001f99d'  # raccoon
    CAT_FACE = '\U0001f431'  # cat face
    CAT = '\U0001f408'  # cat
    BLACK_CAT = '\U0001f408\u200d\u2b1b'  # black cat
    LION = '\U0001f981'  # lion
    TIGER_FACE = '\U0001f42f'  # tiger face
    TIGER = '\U0001f405'  # tiger
    LEOPARD = '\U0001f406'  # leopard
    HORSE_FACE = '\U0001f434'  # horse face
    MOOSE = '\U0001face'  # moose
    DONKEY = '\U0001facf'  # donkey
    HORSE = '\U0001f40e'  # horse
    UNICORN = '\U0001f984'  # unicorn
    ZEBRA = '\U0001f993'  # zebra
    DEER = '\U0001f98c'  # deer
    BISON = '\U0001f9ac'  # bison
    COW_FACE = '\U0001f42e'  # cow face
    OX = '\U0001f402'  # ox
    WATER_BUFFALO = '\U0001f403'  # water buffalo
    COW = '\U0001f404'  # cow
    PIG_FACE = '\U0001f437'  # pig face
    PIG = '\U0001f416'  # pig
    BOAR = '\U0001f417'  # boar
    PIG_NOSE = '\U0001f43d'  # pig nose
    RAM = '\U0001f40f'  # ram
    EWE = '\U0001f411'  # ewe
    GOAT = '\U0001f410'  # goat
    CAMEL = '\U0001f42a'  # camel
    TWO_HUMP_CAMEL = '\U0001f42b'  # two-hump camel
    LLAMA = '\U0001f999'  # llama
    GIRAFFE = '\U0001f992'  # giraffe
    ELEPHANT = '\U0001f418'  # elephant
    MAMMOTH = '\U0001f9a3'  # mammoth
    RHINOCEROS = '\U0001f98f'  # rhinoceros
    HIPPOPOTAMUS = '\U0001f99b'  # hippopotamus
    MOUSE_FACE = '\U0001f42d'  # mouse face
    MOUSE = '\U0001f401'  # mouse
    RAT = '\U0001f400'  # rat
    HAMSTER = '\U0001f439'  # hamster
    RABBIT_FACE = '\U0001f430'  # rabbit face
    RABBIT = '\U0001f407'  # rabbit
    CHIPMUNK = '\U0001f43f\ufe0f'  # chipmunk
    BEAVER = '\U0001f9ab'  # beaver
    HEDGEHOG = '\U0001f994'  # hedgehog
    BAT = '\U0001f987'  # bat
    BEAR = '\U0001f43b'  # bear
    POLAR_BEAR = '\U0001f43b\u200d\u2744\ufe0f'  # polar bear
    KOALA = '\U0001f428'  # koala
    PANDA = '\U0001f43c'  # panda
    SLOTH = '\U0001f9a5'  # sloth
    OTTER = '\U0001f9a6'  # otter
    SKUNK = '\U0001f9a8'  # skunk
    KANGAROO = '\U0001f998'  # kangaroo
    BADGER = '\U0001f9a1'  # badger
    PAW_PRINTS = '\U0001f43e'  # paw prints
    TURKEY = '\U0001f983'  # turkey
    CHICKEN = '\U0001f414'  # chicken
    ROOSTER = '\U0001f413'  # rooster
    HATCHING_CHICK = '\U0001f423'  # hatching chick
    BABY_CHICK = '\U0001f424'  # baby chick
    FRONT_FACING_BABY_CHICK = '\U0001f425'  # front-facing baby chick
    BIRD = '\U0001f426'  # bird
    PENGUIN = '\U0001f427'  # penguin
    DOVE = '\U0001f54a\ufe0f'  # dove
    EAGLE = '\U0001f985'  # eagle
    DUCK = '\U0001f986'  # duck
    SWAN = '\U0001f9a2'  # swan
    OWL = '\U0001f989'  # owl
    DODO = '\U0001f9a4'  # dodo
    FEATHER = '\U0001fab6'  # feather
    FLAMINGO = '\U0001f9a9'  # flamingo
    PEACOCK = '\U0001f99a'  # peacock
    PARROT = '\U0001f99c'  # parrot
    WING = '\U0001fabd'  # wing
    BLACK_BIRD = '\U0001f426\u200d\u2b1b'  # black bird
    GOOSE = '\U0001fabf'  # goose
    PHOENIX = '\U0001f426\u200d\U0001f525'  # phoenix
    FROG = '\U0001f438'  # frog
    CROCODILE = '\U0001f40a'  # crocodile
    TURTLE = '\U0001f422'  # turtle
    LIZARD = '\U0001f98e'  # lizard
    SNAKE = '\U0001f40d'  # snake
    DRAGON_FACE = '\U0001f432'  # dragon face
    DRAGON = '\U0001f409'  # dragon
    SAUROPOD = '\U0001f995'  # sauropod
    T_REX = '\U0001f996'  # T-Rex
    SPOUTING_WHALE = '\U0001f433'  # spouting whale
    WHALE = '\U0001f40b'  # whale
    DOLPHIN = '\U0001f42c'  # dolphin
    SEAL = '\U0001f9ad'  # seal
    FISH = '\U0001f41f'  # fish
    TROPICAL_FISH = '\U0001f420'  # tropical fish
    BLOWFISH = '\U0001f421'  # blowfish
    SHARK = '\U0001f988'  # shark
    OCTOPUS = '\U0001f419'  # octopus
    SPIRAL_SHELL = '\U0001f41a'  # spiral shell
    CORAL = '\U0001fab8'  # coral
    JELLYFISH = '\U0001fabc'  # jellyfish
    SNAIL = '\U0001f40c'  # snail
    BUTTERFLY = '\U0001f98b'  # butterfly
    BUG = '\U0001f41b'  # bug
    ANT = '\U0001f41c'  # ant
    HONEYBEE = '\U0001f41d'  # honeybee
    BEETLE = '\U0001fab2'  # beetle
    LADY_BEETLE = '\U0001f41e'  # lady beetle
    CRICKET = '\U0001f997'  # cricket
    COCKROACH = '\U0001fab3'  # cockroach
    SPIDER = '\U0001f577\ufe0f'  # spider
    SPIDER_WEB = '\U0001f578\ufe0f'  # spider web
    SCORPION = '\U0001f982'  # scorpion
    MOSQUITO = '\U0001f99f'  # mosquito
    FLY = '\U0001fab0'  # fly
    WORM = '\U0001fab1'  # worm
    MICROBE = '\U0001f9a0'  # microbe
    BOUQUET = '\U0001f490'  # bouquet
    CHERRY_BLOSSOM = '\U0001f338'  # cherry blossom
    WHITE_FLOWER = '\U0001f4ae'  # white flower
    LOTUS = '\U0001fab7'  # lotus
    ROSETTE = '\U0001f3f5\ufe0f'  # rosette
    ROSE = '\U0001f339'  # rose
    WILTED_FLOWER = '\U0001f940'  # wilted flower
    HIBISCUS = '\U0001f33a'  # hibiscus
    SUNFLOWER = '\U0001f33b'  # sunflower
    BLOSSOM = '\U0001f33c'  # blossom
    TULIP = '\U0001f337'  # tulip
    HYACINTH = '\U0001fabb'  # hyacinth
    SEEDLING = '\U0001f331'  # seedling
    POTTED_PLANT = '\U0001fab4'  # potted plant
    EVERGREEN_TREE = '\U0001f332'  # evergreen tree
    DECIDUOUS_TREE = '\U0001f333'  # deciduous tree
    PALM_TREE = '\U0001f334'  # palm tree
    CACTUS = '\U0001f335'  # cactus
    SHEAF_OF_RICE = '\U0001f33e'  # sheaf of rice
    HERB = '\U0001f33f'  # herb
    SHAMROCK = '\u2618\ufe0f'  # shamrock
    FOUR_LEAF_CLOVER = '\U0001f340'  # four leaf clover
    MAPLE_LEAF = '\U0001f341'  # maple leaf
    FALLEN_LEAF = '\U0001f342'  # fallen leaf
    LEAF_FLUTTERING_IN_WIND = '\U0001f343'  # leaf fluttering in wind
    EMPTY_NEST = '\U0001fab9'  # empty nest
    NEST_WITH_EGGS = '\U0001faba'  # nest with eggs
    MUSHROOM = '\U0001f344'  # mushroom
    GRAPES = '\U0001f347'  # grapes
    MELON = '\U0001f348'  # melon
    WATERMELON = '\U0001f349'  # watermelon
    TANGERINE = '\U0001f34a'  # tangerine
    LEMON = '\U0001f34b'  # lemon
    LIME = '\U0001f34b\u200d\U0001f7e9'  # lime
    BANANA = '\U0001f34c'  # banana
    PINEAPPLE = '\U0001f34d'  # pineapple
    MANGO = '\U0001f96d'  # mango
    RED_APPLE = '\U0001f34e'  # red apple
    GREEN_APPLE = '\U0001f34f'  # green apple
    PEAR = '\U0001f350'  # pear
    PEACH = '\U0001f351'  # peach
    CHERRIES = '\U0001f352'  # cherries
    STRAWBERRY = '\U0001f353'  # strawberry
    BLUEBERRIES = '\U0001fad0'  # blueberries
    KIWI_FRUIT = '\U0001f95d'  # kiwi fruit
    TOMATO = '\U0001f345'  # tomato
    OLIVE = '\U0001fad2'  # olive
    COCONUT = '\U0001f965'  # coconut
    AVOCADO = '\U0001f951'  # avocado
    EGGPLANT = '\U0001f346'  # eggplant
    POTATO = '\U0001f954'  # potato
    CARROT = '\U0001f955'  # carrot
    EAR_OF_CORN = '\U0001f33d'  # ear of corn
    HOT_PEPPER = '\U0001f336\ufe0f'  # hot pepper
    BELL_PEPPER = '\U0001fad1'  # bell pepper
    CUCUMBER = '\U0001f952'  # cucumber
    LEAFY_GREEN = '\U0001f96c'  # leafy green
    BROCCOLI = '\U0001f966'  # broccoli
    GARLIC = '\U0001f9c4'  # garlic
    ONION = '\U0001f9c5'  # onion
    PEANUTS = '\U0001f95c'  # peanuts
    BEANS = '\U0001fad8'  # beans
    CHESTNUT = '\U0001f330'  # chestnut
    GINGER_ROOT = '\U0001fada'  # ginger root
    PEA_POD = '\U0001fadb'  # pea pod
    BROWN_MUSHROOM = '\U0001f344\u200d\U0001f7eb'  # brown mushroom
    BREAD = '\U0001f35e'  # bread
    CROISSANT = '\U0001f950'  # croissant
    BAGUETTE_BREAD = '\U0001f956'  # baguette bread
    FLATBREAD = '\U0001fad3'  # flatbread
    PRETZEL = '\U0001f968'  # pretzel
    BAGEL = '\U0001f96f'  # bagel
    PANCAKES = '\U0001f95e'  # pancakes
    WAFFLE = '\U0001f9c7'  # waffle
    CHEESE_WEDGE = '\U0001f9c0'  # cheese wedge
    MEAT_ON_BONE = '\U0001f356'  # meat on bone
    POULTRY_LEG = '\U0001f357'  # poultry leg
    CUT_OF_MEAT = '\U0001f969'  # cut of meat
    BACON = '\U0001f953'  # bacon
    HAMBURGER = '\U0001f354'  # hamburger
    FRENCH_FRIES = '\U0001f35f'  # french fries
    PIZZA = '\U0001f355'  # pizza
    HOT_DOG = '\U0001f32d'  # hot dog
    SANDWICH = '\U0001f96a'  # sandwich
    TACO = '\U0001f32e'  # taco
    BURRITO = '\U0001f32f'  # burrito
    TAMALE = '\U0001fad4'  # tamale
    STUFFED_FLATBREAD = '\U0001f959'  # stuffed flatbread
    FALAFEL = '\U0001f9c6'  # falafel
    EGG = '\U0001f95a'  # egg
    COOKING = '\U0001f373'  # cooking
    SHALLOW_PAN_OF_FOOD = '\U0001f958'  # shallow pan of food
    POT_OF_FOOD = '\U0001f372'  # pot of food
    FONDUE = '\U0001fad5'  # fondue
    BOWL_WITH_SPOON = '\U0001f963'  # bowl with spoon
    GREEN_SALAD = '\U0001f957'  # green salad
    POPCORN = '\U0001f37f'  # popcorn
    BUTTER = '\U0001f9c8'  # butter
    SALT = '\U0001f9c2'  # salt
    CANNED_FOOD = '\U0001f96b'  # canned food
    BENTO_BOX = '\U0001f371'  # bento box
    RICE_CRACKER = '\U0001f358'  # rice cracker
    RICE_BALL = '\U0001f359'  # rice ball
    COOKED_RICE = '\U0001f35a'  # cooked rice
    CURRY_RICE = '\U0001f35b'  # curry rice
    STEAMING_BOWL = '\U0001f35c'  # steaming bowl
    SPAGHETTI = '\U0001f35d'  # spaghetti
    ROASTED_SWEET_POTATO = '\U0001f360'  # roasted sweet potato
    ODEN = '\U0001f362'  # oden
    SUSHI = '\U0001f363'  # sushi
    FRIED_SHRIMP = '\U0001f364'  # fried shrimp
    FISH_CAKE_WITH_SWIRL = '\U0001f365'  # fish cake with swirl
    MOON_CAKE = '\U0001f96e'  # moon cake
    DANGO = '\U0001f361'  # dango
    DUMPLING = '\U0001f95f'  # dumpling
    FORTUNE_COOKIE = '\U0001f960'  # fortune cookie
    TAKEOUT_BOX = '\U0001f961'  # takeout box
    CRAB = '\U0001f980'  # crab
    LOBSTER = '\U0001f99e'  # lobster
    SHRIMP = '\U0001f990'  # shrimp
    SQUID = '\U0001f991'  # squid
    OYSTER = '\U0001f9aa'  # oyster
    SOFT_ICE_CREAM = '\U0001f366'  # soft ice cream
    SHAVED_ICE = '\U0001f367'  # shaved ice
    ICE_CREAM = '\U0001f368'  # ice cream
    DOUGHNUT = '\U0001f369'  # doughnut
    COOKIE = '\U0001f36a'  # cookie
    BIRTHDAY_CAKE = '\U0001f382'  # birthday cake
    SHORTCAKE = '\U0001f370'  # shortcake
    CUPCAKE = '\U0001f9c1'  # cupcake
    PIE = '\U0001f967'  # pie
    CHOCOLATE_BAR = '\U0001f36b'  # chocolate bar
    CANDY = '\U0001f36c'  # candy
    LOLLIPOP = '\U0001f36d'  # lollipop
    CUSTARD = '\U0001f36e'  # custard
    HONEY_POT = '\U0001f36f'  # honey pot
    BABY_BOTTLE = '\U0001f37c'  # baby bottle
    GLASS_OF_MILK = '\U0001f95b'  # glass of milk
    HOT_BEVERAGE = '\u2615'  # hot beverage
    TEAPOT = '\U0001fad6'  # teapot
    TEACUP_WITHOUT_HANDLE = '\U0001f375'  # teacup without handle
    SAKE = '\U0001f376'  # sake
    BOTTLE_WITH_POPPING_CORK = '\U0001f37e'  # bottle with popping cork
    WINE_GLASS = '\U0001f377'  # wine glass
    COCKTAIL_GLASS = '\U0001f378'  # cocktail glass
    TROPICAL_DRINK = '\U0001f379'  # tropical drink
    BEER_MUG = '\U0001f37a'  # beer mug
    CLINKING_BEER_MUGS = '\U0001f37b'  # clinking beer mugs
    CLINKING_GLASSES = '\U0001f942'  # clinking glasses
    TUMBLER_GLASS = '\U0001f943'  # tumbler glass
    POURING_LIQUID = '\U0001fad7'  # pouring liquid
    CUP_WITH_STRAW = '\U0001f964'  # cup with straw
    BUBBLE_TEA = '\U0001f9cb'  # bubble tea
    BEVERAGE_BOX = '\U0001f9c3'  # beverage box
    MATE = '\U0001f9c9'  # mate
    ICE = '\U0001f9ca'  # ice
    CHOPSTICKS = '\U0001f962'  # chopsticks
    FORK_AND_KNIFE_WITH_PLATE = '\U0001f37d\ufe0f'  # fork and knife with plate
    FORK_AND_KNIFE = '\U0001f374'  # fork and knife
    SPOON = '\U0001f944'  # spoon
    KITCHEN_KNIFE = '\U0001f52a'  # kitchen knife
    JAR = '\U0001fad9'  # jar
    AMPHORA = '\U0001f3fa'  # amphora
    GLOBE_SHOWING_EUROPE_AFRICA = '\U0001f30d'  # globe showing Europe-Africa
    GLOBE_SHOWING_AMERICAS = '\U0001f30e'  # globe showing Americas
    GLOBE_SHOWING_ASIA_AUSTRALIA = '\U0001f30f'  # globe showing Asia-Australia
    GLOBE_WITH_MERIDIANS = '\U0001f310'  # globe with meridians
    WORLD_MAP = '\U0001f5fa\ufe0f'  # world map
    MAP_OF_JAPAN = '\U0001f5fe'  # map of Japan
    COMPASS = '\U0001f9ed'  # compass
    SNOW_CAPPED_MOUNTAIN = '\U0001f3d4\ufe0f'  # snow-capped mountain
    MOUNTAIN = '\u26f0\ufe0f'  # mountain
    VOLCANO = '\U0001f30b'  # volcano
    MOUNT_FUJI = '\U0001f5fb'  # mount fuji
    CAMPING = '\U0001f3d5\ufe0f'  # camping
    BEACH_WITH_UMBRELLA = '\U0001f3d6\ufe0f'  # beach with umbrella
    DESERT = '\U0001f3dc\ufe0f'  # desert
    DESERT_ISLAND = '\U0001f3dd\ufe0f'  # desert island
    NATIONAL_PARK = '\U0001f3de\ufe0f'  # national park
    STADIUM = '\U0001f3df\ufe0f'  # stadium
    CLASSICAL_BUILDING = '\U0001f3db\ufe0f'  # classical building
    BUILDING_CONSTRUCTION = '\U0001f3d7\ufe0f'  # building construction
    BRICK = '\U0001f9f1'  # brick
    ROCK = '\U0001faa8'  # rock
    WOOD = '\U0001fab5'  # wood
    HUT = '\U0001f6d6'  # hut
    HOUSES = '\U0001f3d8\ufe0f'  # houses
    DERELICT_HOUSE = '\U0001f3da\ufe0f'  # derelict house
    HOUSE = '\U0001f3e0'  # house
    HOUSE_WITH_GARDEN = '\U0001f3e1'  # house with garden
    OFFICE_BUILDING = '\U0001f3e2'  # office building
    JAPANESE_POST_OFFICE = '\U0001f3e3'  # Japanese post office
    POST_OFFICE = '\U0001f3e4'  # post office
    HOSPITAL = '\U0001f3e5'  # hospital
    BANK = '\U0001f3e6'  # bank
    HOTEL = '\U0001f3e8'  # hotel
    LOVE_HOTEL = '\U0001f3e9'  # love hotel
    CONVENIENCE_STORE = '\U0001f3ea'  # convenience store
    SCHOOL = '\U0001f3eb'  # school
    DEPARTMENT_STORE = '\U0001f3ec'  # department store
    FACTORY = '\U0001f3ed'  # factory
    JAPANESE_CASTLE = '\U0001f3ef'  # Japanese castle
    CASTLE = '\U0001f3f0'  # castle
    WEDDING = '\U0001f492'  # wedding
    TOKYO_TOWER = '\U0001f5fc'  # Tokyo tower
    STATUE_OF_LIBERTY = '\U0001f5fd'  # Statue of Liberty
    CHURCH = '\u26ea'  # church
    MOSQUE = '\U0001f54c'  # mosque
    HINDU_TEMPLE = '\U0001f6d5'  # hindu temple
    SYNAGOGUE = '\U0001f54d'  # synagogue
    SHINTO_SHRINE = '\u26e9\ufe0f'  # shinto shrine
    KAABA = '\U0001f54b'  # kaaba
    FOUNTAIN = '\u26f2'  # fountain
    TENT = '\u26fa'  # tent
    FOGGY = '\U0001f301'  # foggy
    NIGHT_WITH_STARS = '\U0001f303'  # night with stars
    CITYSCAPE = '\U0001f3d9\ufe0f'  # cityscape
    SUNRISE_OVER_MOUNTAINS = '\U0001f304'  # sunrise over mountains
    SUNRISE = '\U0001f305'  # sunrise
    CITYSCAPE_AT_DUSK = '\U0001f306'  # cityscape at dusk
    SUNSET = '\U0001f307'  # sunset
    BRIDGE_AT_NIGHT = '\U0001f309'  # bridge at night
    HOT_SPRINGS = '\u2668\ufe0f'  # hot springs
    CAROUSEL_HORSE = '\U0001f3a0'  # carousel horse
    PLAYGROUND_SLIDE = '\U0001f6dd'  # playground slide
    FERRIS_WHEEL = '\U0001f3a1'  # ferris wheel
    ROLLER_COASTER = '\U0001f3a2'  # roller coaster
    BARBER_POLE = '\U0001f488'  # barber pole
    CIRCUS_TENT = '\U0001f3aa'  # circus tent
    LOCOMOTIVE = '\U0001f682'  # locomotive
    RAILWAY_CAR = '\U0001f683'  # railway car
    HIGH_SPEED_TRAIN = '\U0001f684'  # high-speed train
    BULLET_TRAIN = '\U0001f685'  # bullet train
    TRAIN = '\U0001f686'  # train
    METRO = '\U0001f687'  # metro
    LIGHT_RAIL = '\U0001f688'  # light rail
    STATION = '\U0001f689'  # station
    TRAM = '\U0001f68a'  # tram
    MONORAIL = '\U0001f69d'  # monorail
    MOUNTAIN_RAILWAY = '\U0001f69e'  # mountain railway
    TRAM_CAR = '\U0001f68b'  # tram car
    BUS = '\U0001f68c'  # bus
    ONCOMING_BUS = '\U0001f68d'  # oncoming bus
    TROLLEYBUS = '\U0001f68e'  # trolleybus
    MINIBUS = '\U0001f690'  # minibus
    AMBULANCE = '\U0001f691'  # ambulance
    FIRE_ENGINE = '\U0001f692'  # fire engine
    POLICE_CAR = '\U0001f693'  # police car
    ONCOMING_POLICE_CAR = '\U0001f694'  # oncoming police car
    TAXI = '\U0001f695'  # taxi
    ONCOMING_TAXI = '\U0001f696'  # oncoming taxi
    AUTOMOBILE = '\U0001f697'  # automobile
    ONCOMING_AUTOMOBILE = '\U0001f698'  # oncoming automobile
    SPORT_UTILITY_VEHICLE = '\U0001f699'  # sport utility vehicle
    PICKUP_TRUCK = '\U0001f6fb'  # pickup truck
    DELIVERY_TRUCK = '\U0001f69a'  # delivery truck
    ARTICULATED_LORRY = '\U0001f69b'  # articulated lorry
    TRACTOR = '\U0001f69c'  # tractor
    RACING_CAR = '\U0001f3ce\ufe0f'  # racing car
    MOTORCYCLE = '\U0001f3cd\ufe0f'  # motorcycle
    MOTOR_SCOOTER = '\U0001f6f5'  # motor scooter
    MANUAL_WHEELCHAIR = '\U0001f9bd'  # manual wheelchair
    MOTORIZED_WHEELCHAIR = '\U0001f9bc'  # motorized wheelchair
    AUTO_RICKSHAW = '\U0001f6fa'  # auto rickshaw
    BICYCLE = '\U0001f6b2'  # bicycle
    KICK_SCOOTER = '\U0001f6f4'  # kick scooter
    SKATEBOARD = '\U0001f6f9'  # skateboard
    ROLLER_SKATE = '\U0001f6fc'  # roller skate
    BUS_STOP = '\U0001f68f'  # bus stop
    MOTORWAY = '\U0001f6e3\ufe0f'  # motorway
    RAILWAY_TRACK = '\U0001f6e4\ufe0f'  # railway track
    OIL_DRUM = '\U0001f6e2\ufe0f'  # oil drum
    FUEL_PUMP = '\u26fd'  # fuel pump
    WHEEL = '\U0001f6de'  # wheel
    POLICE_CAR_LIGHT = '\U0001f6a8'  # police car light
    HORIZONTAL_TRAFFIC_LIGHT = '\U0001f6a5'  # horizontal traffic light
    VERTICAL_TRAFFIC_LIGHT = '\U0001f6a6'  # vertical traffic light
    STOP_SIGN = '\U0001f6d1'  # stop sign
    CONSTRUCTION = '\U0001f6a7'  # construction
    ANCHOR = '\u2693'  # anchor
    RING_BUOY = '\U0001f6df'  # ring buoy
    SAILBOAT = '\u26f5'  # sailboat
    CANOE = '\U0001f6f6'  # canoe
    SPEEDBOAT = '\U0001f6a4'  # speedboat
    PASSENGER_SHIP = '\U0001f6f3\ufe0f'  # passenger ship
    FERRY = '\u26f4\ufe0f'  # ferry
    MOTOR_BOAT = '\U0001f6e5\ufe0f'  # motor boat
    SHIP = '\U0001f6a2'  # ship
    AIRPLANE = '\u2708\ufe0f'  # airplane
    SMALL_AIRPLANE = '\U0001f6e9\ufe0f'  # small airplane
    AIRPLANE_DEPARTURE = '\U0001f6eb'  # airplane departure
    AIRPLANE_ARRIVAL = '\U0001f6ec'  # airplane arrival
    PARACHUTE = '\U0001fa82'  # parachute
    SEAT = '\U0001f4ba'  # seat
    HELICOPTER = '\U0001f681'  # helicopter
    SUSPENSION_RAILWAY = '\U0001f69f'  # suspension railway
    MOUNTAIN_CABLEWAY = '\U0001f6a0'  # mountain cableway
    AERIAL_TRAMWAY = '\U0001f6a1'  # aerial tramway
    SATELLITE = '\U0001f6f0\ufe0f'  # satellite
    ROCKET = '\U0001f680'  # rocket
    FLYING_SAUCER = '\U0001f6f8'  # flying saucer
    BELLHOP_BELL = '\U0001f6ce\ufe0f'  # bellhop bell
    LUGGAGE = '\U0001f9f3'  # luggage
    HOURGLASS_DONE = '\u231b'  # hourglass done
    HOURGLASS_NOT_DONE = '\u23f3'  # hourglass not done
    WATCH = '\u231a'  # watch
    ALARM_CLOCK = '\u23f0'  # alarm clock
    STOPWATCH = '\u23f1\ufe0f'  # stopwatch
    TIMER_CLOCK = '\u23f2\ufe0f'  # timer clock
    MANTELPIECE_CLOCK = '\U0001f570\ufe0f'  # mantelpiece clock
    TWELVE_OCLOCK = '\U0001f55b'  # twelve o\u2019clock
    TWELVE_THIRTY = '\U0001f567'  # twelve-thirty
    ONE_OCLOCK = '\U0001f550'  # one o\u2019clock
    ONE_THIRTY = '\U0001f55c'  # one-thirty
    TWO_OCLOCK = '\U0001f551'  # two o\u2019clock
    TWO_THIRTY = '\U0001f55d'  # two-thirty
    THREE_OCLOCK = '\U0001f552'  # three o\u2019clock
    THREE_THIRTY = '\U0001f55e'  # three-thirty
    FOUR_OCLOCK = '\U0001f553'  # four o\u2019clock
    FOUR_THIRTY = '\U0001f55f'  # four-thirty
    FIVE_OCLOCK = '\U0001f554'  # five o\u2019clock
    FIVE_THIRTY = '\U0001f560'  # five-thirty
    SIX_OCLOCK = '\U0001f555'  # six o\u2019clock
    SIX_THIRTY = '\U0001f561'  # six-thirty
    SEVEN_OCLOCK = '\U0001f556'  # seven o\u2019clock
    SEVEN_THIRTY = '\U0001f562'  # seven-thirty
    EIGHT_OCLOCK = '\U0001f557'  # eight o\u2019clock
    EIGHT_THIRTY = '\U0001f563'  # eight-thirty
    NINE_OCLOCK = '\U0001f558'  # nine o\u2019clock
    NINE_THIRTY = '\U0001f564'  # nine-thirty
    TEN_OCLOCK = '\U0001f559'  # ten o\u2019clock
    TEN_THIRTY = '\U0001f565'  # ten-thirty
    ELEVEN_OCLOCK = '\U0001f55a'  # eleven o\u2019clock
    ELEVEN_THIRTY = '\U0001f566'  # eleven-thirty
    NEW_MOON = '\U0001f311'  # new moon
    WAXING_CRESCENT_MOON = '\U0001f312'  # waxing crescent moon
    FIRST_QUARTER_MOON = '\U0001f313'  # first quarter moon
    WAXING_GIBBOUS_MOON = '\U0001f314'  # waxing gibbous moon
    FULL_MOON = '\U0001f315'  # full moon
    WANING_GIBBOUS_MOON = '\U0001f316'  # waning gibbous moon
    LAST_QUARTER_MOON = '\U0001f317'  # last quarter moon
    WANING_CRESCENT_MOON = '\U0001f318'  # waning crescent moon
    CRESCENT_MOON = '\U0001f319'  # crescent moon
    NEW_MOON_FACE = '\U0001f31a'  # new moon face
    FIRST_QUARTER_MOON_FACE = '\U0001f31b'  # first quarter moon face
    LAST_QUARTER_MOON_FACE = '\U0001f31c'  # last quarter moon face
    THERMOMETER = '\U0001f321\ufe0f'  # thermometer
    SUN = '\u2600\ufe0f'  # sun
    FULL_MOON_FACE = '\U0001f31d'  # full moon face
    SUN_WITH_FACE = '\U0001f31e'  # sun with face
    RINGED_PLANET = '\U0001fa90'  # ringed planet
    STAR = '\u2b50'  # star
    GLOWING_STAR = '\U0001f31f'  # glowing star
    SHOOTING_STAR = '\U0001f320'  # shooting star
    MILKY_WAY = '\U0001f30c'  # milky way
    CLOUD = '\u2601\ufe0f'  # cloud
    SUN_BEHIND_CLOUD = '\u26c5'  # sun behind cloud
    CLOUD_WITH_LIGHTNING_AND_RAIN = '\u26c8\ufe0f'  # cloud with lightning and rain
    SUN_BEHIND_SMALL_CLOUD = '\U0001f324\ufe0f'  # sun behind small cloud
    SUN_BEHIND_LARGE_CLOUD = '\U0001f325\ufe0f'  # sun behind large cloud
    SUN_BEHIND_RAIN_CLOUD = '\U0001f326\ufe0f'  # sun behind rain cloud
    CLOUD_WITH_RAIN = '\U0001f327\ufe0f'  # cloud with rain
    CLOUD_WITH_SNOW = '\U0001f328\ufe0f'  # cloud with snow
    CLOUD_WITH_LIGHTNING = '\U0001f329\ufe0f'  # cloud with lightning
    TORNADO = '\U0001f32a\ufe0f'  # tornado
    FOG = '\U0001f32b\ufe0f'  # fog
    WIND_FACE = '\U0001f32c\ufe0f'  # wind face
    CYCLONE = '\U0001f300'  # cyclone
    RAINBOW = '\U0001f308'  # rainbow
    CLOSED_UMBRELLA = '\U0001f302'  # closed umbrella
    UMBRELLA = '\u2602\ufe0f'  # umbrella
    UMBRELLA_WITH_RAIN_DROPS = '\u2614'  # umbrella with rain drops
    UMBRELLA_ON_GROUND = '\u26f1\ufe0f'  # umbrella on ground
    HIGH_VOLTAGE = '\u26a1'  # high voltage
    SNOWFLAKE = '\u2744\ufe0f'  # snowflake
    SNOWMAN = '\u2603\ufe0f'  # snowman
    SNOWMAN_WITHOUT_SNOW = '\u26c4'  # snowman without snow
    COMET = '\u2604\ufe0f'  # comet
    FIRE = '\U0001f525'  # fire
    DROPLET = '\U0001f4a7'  # droplet
    WATER_WAVE = '\U0001f30a'  # water wave
    JACK_O_LANTERN = '\U0001f383'  # jack-o-lantern
    CHRISTMAS_TREE = '\U0001f384'  # Christmas tree
    FIREWORKS = '\U0001f386'  # fireworks
    SPARKLER = '\U0001f387'  # sparkler
    FIRECRACKER = '\U0001f9e8'  # firecracker
    SPARKLES = '\u2728'  # sparkles
    BALLOON = '\U0001f388'  # balloon
    PARTY_POPPER = '\U0001f389'  # party popper
    CONFETTI_BALL = '\U0001f38a'  # confetti ball
    TANABATA_TREE = '\U0001f38b'  # tanabata tree
    PINE_DECORATION = '\U0001f38d'  # pine decoration
    JAPANESE_DOLLS = '\U0001f38e'  # Japanese dolls
    CARP_STREAMER = '\U0001f38f'  # carp streamer
    WIND_CHIME = '\U0001f390'  # wind chime
    MOON_VIEWING_CEREMONY = '\U0001f391'  # moon viewing ceremony
    RED_ENVELOPE = '\U0001f9e7'  # red envelope
    RIBBON = '\U0001f380'  # ribbon
    WRAPPED_GIFT = '\U0001f381'  # wrapped gift
    REMINDER_RIBBON = '\U0001f397\ufe0f'  # reminder ribbon
    ADMISSION_TICKETS = '\U0001f39f\ufe0f'  # admission tickets
    TICKET = '\U0001f3ab'  # ticket
    MILITARY_MEDAL = '\U0001f396\ufe0f'  # military medal
    TROPHY = '\U0001f3c6'  # trophy
    SPORTS_MEDAL = '\U0001f3c5'  # sports medal
    FIRST_PLACE_MEDAL = '\U0001f947'  # 1st place medal
    SECOND_PLACE_MEDAL = '\U0001f948'  # 2nd place medal
    THIRD_PLACE_MEDAL = '\U0001f949'  # 3rd place medal
    SOCCER_BALL = '\u26bd'  # soccer ball
    BASEBALL = '\u26be'  # baseball
    SOFTBALL = '\U0001f94e'  # softball
    BASKETBALL = '\U0001f3c0'  # basketball
    VOLLEYBALL = '\U0001f3d0'  # volleyball
    AMERICAN_FOOTBALL = '\U0001f3c8'  # american football
    RUGBY_FOOTBALL = '\U0001f3c9'  # rugby football
    TENNIS = '\U0001f3be'  # tennis
    FLYING_DISC = '\U0001f94f'  # flying disc
    BOWLING = '\U0001f3b3'  # bowling
    CRICKET_GAME = '\U0001f3cf'  # cricket game
    FIELD_HOCKEY = '\U0001f3d1'  # field hockey
    ICE_HOCKEY = '\U0001f3d2'  # ice hockey
    LACROSSE = '\U0001f94d'  # lacrosse
    PING_PONG = '\U0001f3d3'  # ping pong
    BADMINTON = '\U0001f3f8'  # badminton
    BOXING_GLOVE = '\U0001f94a'  # boxing glove
    MARTIAL_ARTS_UNIFORM = '\U0001f94b'  # martial arts uniform
    GOAL_NET = '\U0001f945'  # goal net
    FLAG_IN_HOLE = '\u26f3'  # flag in hole
    ICE_SKATE = '\u26f8\ufe0f'  # ice skate
    FISHING_POLE = '\U0001f3a3'  # fishing pole
    DIVING_MASK = '\U0001f93f'  # diving mask
    RUNNING_SHIRT = '\U0001f3bd'  # running shirt
    SKIS = '\U0001f3bf'  # skis
    SLED = '\U0001f6f7'  # sled
    CURLING_STONE = '\U0001f94c'  # curling stone
    BULLSEYE = '\U0001f3af'  # bullseye
    YO_YO = '\U0001fa80'  # yo-yo
    KITE = '\U0001fa81'  # kite
    WATER_PISTOL = '\U0001f52b'  # water pistol
    POOL_8_BALL = '\U0001f3b1'  # pool 8 ball
    CRYSTAL_BALL = '\U0001f52e'  # crystal ball
    MAGIC_WAND = '\U0001fa84'  # magic wand
    VIDEO_GAME = '\U0001f3ae'  # video game
    JOYSTICK = '\U0001f579\ufe0f'  # joystick
    SLOT_MACHINE = '\U0001f3b0'  # slot machine
    GAME_DIE = '\U0001f3b2'  # game die
    PUZZLE_PIECE = '\U0001f9e9'  # puzzle piece
    TEDDY_BEAR = '\U0001f9f8'  # teddy bear
    PINATA = '\U0001fa85'  # pi\xf1ata
    MIRROR_BALL = '\U0001faa9'  # mirror ball
    NESTING_DOLLS = '\U0001fa86'  # nesting dolls
    SPADE_SUIT = '\u2660\ufe0f'  # spade suit
    HEART_SUIT = '\u2665\ufe0f'  # heart suit
    DIAMOND_SUIT = '\u2666\ufe0f'  # diamond suit
    CLUB_SUIT = '\u2663\ufe0f'  # club suit
    CHESS_PAWN = '\u265f\ufe0f'  # chess pawn
    JOKER = '\U0001f0cf'  # joker
    MAHJONG_RED_DRAGON = '\U0001f004'  # mahjong red dragon
    FLOWER_PLAYING_CARDS = '\U0001f3b4'  # flower playing cards
    PERFORMING_ARTS = '\U0001f3ad'  # performing arts
    FRAMED_PICTURE = '\U0001f5bc\ufe0f'  # framed picture
    ARTIST_PALETTE = '\U0001f3a8'  # artist palette
    THREAD = '\U0001f9f5'  # thread
    SEWING_NEEDLE = '\U0001faa1'  # sewing needle
    YARN = '\U0001f9f6'  # yarn
    KNOT = '\U0001faa2'  # knot
    GLASSES = '\U0001f453'  # glasses
    SUNGLASSES = '\U0001f576\ufe0f'  # sunglasses
    GOGGLES = '\U0001f97d'  # goggles
    LAB_COAT = '\U0001f97c'  # lab coat
    SAFETY_VEST = '\U0001f9ba'  # safety vest
    NECKTIE = '\U0001f454'  # necktie
    T_SHIRT = '\U0001f455'  # t-shirt
    JEANS = '\U0001f456'  # jeans
    SCARF = '\U0001f9e3'  # scarf
    GLOVES = '\U0001f9e4'  # gloves
    COAT = '\U0001f9e5'  # coat
    SOCKS = '\U0001f9e6'  # socks
    DRESS = '\U0001f457'  # dress
    KIMONO = '\U0001f458'  # kimono
    SARI = '\U0001f97b'  # sari
    ONE_PIECE_SWIMSUIT = '\U0001fa71'  # one-piece swimsuit
    BRIEFS = '\U0001fa72'  # briefs
    SHORTS = '\U0001fa73'  # shorts
    BIKINI = '\U0001f459'  # bikini
    WOMANS_CLOTHES = '\U0001f45a'  # woman\u2019s clothes
    FOLDING_HAND_FAN = '\U0001faad'  # folding hand fan
    PURSE = '\U0001f45b'  # purse
    HANDBAG = '\U0001f45c'  # handbag
    CLUTCH_BAG = '\U0001f45d'  # clutch bag
    SHOPPING_BAGS = '\U0001f6cd\ufe0f'  # shopping bags
    BACKPACK = '\U0001f392'  # backpack
    THONG_SANDAL = '\U0001fa74'  # thong sandal
    MANS_SHOE = '\U0001f45e'  # man\u2019s shoe
    RUNNING_SHOE = '\U0001f45f'  # running shoe
    HIKING_BOOT = '\U0001f97e'  # hiking boot
    FLAT_SHOE = '\U0001f97f'  # flat shoe
    HIGH_HEELED_SHOE = '\U0001f460'  # high-heeled shoe
    WOMANS_SANDAL = '\U0001f461'  # woman\u2019s sandal
    BALLET_SHOES = '\U0001fa70'  # ballet shoes
    WOMANS_BOOT = '\U0001f462'  # woman\u2019s boot
    HAIR_PICK = '\U0001faae'  # hair pick
    CROWN = '\U0001f451'  # crown
    WOMANS_HAT = '\U0001f452'  # woman\u2019s hat
    TOP_HAT = '\U0001f3a9'  # top hat
    GRADUATION_CAP = '\U0001f393'  # graduation cap
    BILLED_CAP = '\U0001f9e2'  # billed cap
    MILITARY_HELMET = '\U0001fa96'  # military helmet
    RESCUE_WORKERS_HELMET = '\u26d1\ufe0f'  # rescue worker\u2019s helmet
    PRAYER_BEADS = '\U0001f4ff'  # prayer beads
    LIPSTICK = '\U0001f484'  # lipstick
    RING = '\U0001f48d'  # ring
    GEM_STONE = '\U0001f48e'  # gem stone
    MUTED_SPEAKER = '\U0001f507'  # muted speaker
    SPEAKER_LOW_VOLUME = '\U0001f508'  # speaker low volume
    SPEAKER_MEDIUM_VOLUME = '\U0001f509'  # speaker medium volume
    SPEAKER_HIGH_VOLUME = '\U0001f50a'  # speaker high volume
    LOUDSPEAKER = '\U0001f4e2'  # loudspeaker
    MEGAPHONE = '\U0001f4e3'  # megaphone
    POSTAL_HORN = '\U0001f4ef'  # postal horn
    BELL = '\U0001f514'  # bell
    BELL_WITH_SLASH = '\U0001f515'  # bell with slash
    MUSICAL_SCORE = '\U0001f3bc'  # musical score
    MUSICAL_NOTE = '\U0001f3b5'  # musical note
    MUSICAL_NOTES = '\U0001f3b6'  # musical notes
    STUDIO_MICROPHONE = '\U0001f399\ufe0f'  # studio microphone
    LEVEL_SLIDER = '\U0001f39a\ufe0f'  # level slider
    CONTROL_KNOBS = '\U0001f39b\ufe0f'  # control knobs
    MICROPHONE = '\U0001f3a4'  # microphone
    HEADPHONE = '\U0001f3a7'  # headphone
    RADIO = '\U0001f4fb'  # radio
    SAXOPHONE = '\U0001f3b7'  # saxophone
    ACCORDION = '\U0001fa97'  # accordion
    GUITAR = '\U0001f3b8'  # guitar
    MUSICAL_KEYBOARD = '\U0001f3b9'  # musical keyboard
    TRUMPET = '\U0001f3ba'  # trumpet
    VIOLIN = '\U0001f3bb'  # violin
    BANJO = '\U0001fa95'  # banjo
    DRUM = '\U0001f941'  # drum
    LONG_DRUM = '\U0001fa98'  # long drum
    MARACAS = '\U0001fa87'  # maracas
    FLUTE = '\U0001fa88'  # flute
    MOBILE_PHONE = '\U0001f4f1'  # mobile phone
    MOBILE_PHONE_WITH_ARROW = '\U0001f4f2'  # mobile phone with arrow
    TELEPHONE = '\u260e\ufe0f'  # telephone
    TELEPHONE_RECEIVER = '\U0001f4de'  # telephone receiver
    PAGER = '\U0001f4df'  # pager
    FAX_MACHINE = '\U0001f4e0'  # fax machine
    BATTERY = '\U0001f50b'  # battery
    LOW_BATTERY = '\U0001faab'  # low battery
    ELECTRIC_PLUG = '\U0001f50c'  # electric plug
    LAPTOP = '\U0001f4bb'  # laptop
    DESKTOP_COMPUTER = '\U0001f5a5\ufe0f'  # desktop computer
    PRINTER = '\U0001f5a8\ufe0f'  # printer
    KEYBOARD = '\u2328\ufe0f'  # keyboard
    COMPUTER_MOUSE = '\U0001f5b1\ufe0f'  # computer mouse
    TRACKBALL = '\U0001f5b2\ufe0f'  # trackball
    COMPUTER_DISK = '\U0001f4bd'  # computer disk
    FLOPPY_DISK = '\U0001f4be'  # floppy disk
    OPTICAL_DISK = '\U0001f4bf'  # optical disk
    DVD = '\U0001f4c0'  # dvd
    ABACUS = '\U0001f9ee'  # abacus
    MOVIE_CAMERA = '\U0001f3a5'  # movie camera
    FILM_FRAMES = '\U0001f39e\ufe0f'  # film frames
    FILM_PROJECTOR = '\U0001f4fd\ufe0f'  # film projector
    CLAPPER_BOARD = '\U0001f3ac'  # clapper board
    TELEVISION = '\U0001f4fa'  # television
    CAMERA = '\U0001f4f7'  # camera
    CAMERA_WITH_FLASH = '\U0001f4f8'  # camera with flash
    VIDEO_CAMERA = '\U0001f4f9'  # video camera
    VIDEOCASSETTE = '\U0001f4fc'  # videocassette
    MAGNIFYING_GLASS_TILTED_LEFT = '\U0001f50d'  # magnifying glass tilted left
    MAGNIFYING_GLASS_TILTED_RIGHT = '\U0001f50e'  # magnifying glass tilted right
    CANDLE = '\U0001f56f\ufe0f'  # candle
    LIGHT_BULB = '\U0001f4a1'  # light bulb
    FLASHLIGHT = '\U0001f526'  # flashlight
    RED_PAPER_LANTERN = '\U0001f3ee'  # red paper lantern
    DIYA_LAMP = '\U0001fa94'  # diya lamp
    NOTEBOOK_WITH_DECORATIVE_COVER = '\U0001f4d4'  # notebook with decorative cover
    CLOSED_BOOK = '\U0001f4d5'  # closed book
    OPEN_BOOK = '\U0001f4d6'  # open book
    GREEN_BOOK = '\U0001f4d7'  # green book
    BLUE_BOOK = '\U0001f4d8'  # blue book
    ORANGE_BOOK = '\U0001f4d9'  # orange book
    BOOKS = '\U0001f4da'  # books
    NOTEBOOK = '\U0001f4d3'  # notebook
    LEDGER = '\U0001f4d2'  # ledger
    PAGE_WITH_CURL = '\U0001f4c3'  # page with curl
    SCROLL = '\U0001f4dc'  # scroll
    PAGE_FACING_UP = '\U0001f4c4'  # page facing up
    NEWSPAPER = '\U0001f4f0'  # newspaper
    ROLLED_UP_NEWSPAPER = '\U0001f5de\ufe0f'  # rolled-up newspaper
    BOOKMARK_TABS = '\U0001f4d1'  # bookmark tabs
    BOOKMARK = '\U0001f516'  # bookmark
    LABEL = '\U0001f3f7\ufe0f'  # label
    MONEY_BAG = '\U0001f4b0'  # money bag
    COIN = '\U0001fa99'  # coin
    YEN_BANKNOTE = '\U0001f4b4'  # yen banknote
    DOLLAR_BANKNOTE = '\U0001f4b5'  # dollar banknote
    EURO_BANKNOTE = '\U0001f4b6'  # euro banknote
    POUND_BANKNOTE = '\U0001f4b7'  # pound banknote
    MONEY_WITH_WINGS = '\U0001f4b8'  # money with wings
    CREDIT_CARD = '\U0001f4b3'  # credit card
    RECEIPT = '\U0001f9fe'  # receipt
    CHART_INCREASING_WITH_YEN = '\U0001f4b9'  # chart increasing with yen
    ENVELOPE = '\u2709\ufe0f'  # envelope
    E_MAIL = '\U0001f4e7'  # e-mail
    INCOMING_ENVELOPE = '\U0001f4e8'  # incoming envelope
    ENVELOPE_WITH_ARROW = '\U0001f4e9'  # envelope with arrow
    OUTBOX_TRAY = '\U0001f4e4'  # outbox tray
    INBOX_TRAY = '\U0001f4e5'  # inbox tray
    PACKAGE = '\U0001f4e6'  # package
    CLOSED_MAILBOX_WITH_RAISED_FLAG = '\U0001f4eb'  # closed mailbox with raised flag
    CLOSED_MAILBOX_WITH_LOWERED_FLAG = '\U0001f4ea'  # closed mailbox with lowered flag
    OPEN_MAILBOX_WITH_RAISED_FLAG = '\U0001f4ec'  # open mailbox with raised flag
    OPEN_MAILBOX_WITH_LOWERED_FLAG = '\U0001f4ed'  # open mailbox with lowered flag
    POSTBOX = '\U0001f4ee'  # postbox
    BALLOT_BOX_WITH_BALLOT = '\U0001f5f3\ufe0f'  # ballot box with ballot
    PENCIL = '\u270f\ufe0f'  # pencil
    BLACK_NIB = '\u2712\ufe0f'  # black nib
    FOUNTAIN_PEN = '\U0001f58b\ufe0f'  # fountain pen
    PEN = '\U0001f58a\ufe0f'  # pen
    PAINTBRUSH = '\U0001f58c\ufe0f'  # paintbrush
    CRAYON = '\U0001f58d\ufe0f'  # crayon
    MEMO = '\U0001f4dd'  # memo
    BRIEFCASE = '\U0001f4bc'  # briefcase
    FILE_FOLDER = '\U0001f4c1'  # file folder
    OPEN_FILE_FOLDER = '\U0001f4c2'  # open file folder
    CARD_INDEX_DIVIDERS = '\U0001f5c2\ufe0f'  # card index dividers
    CALENDAR = '\U0001f4c5'  # calendar
    TEAR_OFF_CALENDAR = '\U0001f4c6'  # tear-off calendar
    SPIRAL_NOTEPAD = '\U0001f5d2\ufe0f'  # spiral notepad
    SPIRAL_CALENDAR = '\U0001f5d3\ufe0f'  # spiral calendar
    CARD_INDEX = '\U0001f4c7'  # card index
    CHART_INCREASING = '\U0001f4c8'  # chart increasing
    CHART_DECREASING = '\U0001f4c9'  # chart decreasing
    BAR_CHART = '\U0001f4ca'  # bar chart
    CLIPBOARD = '\U0001f4cb'  # clipboard
    PUSHPIN = '\U0001f4cc'  # pushpin
    ROUND_PUSHPIN = '\U0001f4cd'  # round pushpin
    PAPERCLIP = '\U0001f4ce'  # paperclip
    LINKED_PAPERCLIPS = '\U0001f587\ufe0f'  # linked paperclips
    STRAIGHT_RULER = '\U0001f4cf'  # straight ruler
    TRIANGULAR_RULER = '\U0001f4d0'  # triangular ruler
    SCISSORS = '\u2702\ufe0f'  # scissors
    CARD_FILE_BOX = '\U0001f5c3\ufe0f'  # card file box
    FILE_CABINET = '\U0001f5c4\ufe0f'  # file cabinet
    WASTEBASKET = '\U0001f5d1\ufe0f'  # wastebasket
    LOCKED = '\U0001f512'  # locked
    UNLOCKED = '\U0001f513'  # unlocked
    LOCKED_WITH_PEN = '\U0001f50f'  # locked with pen
    LOCKED_WITH_KEY = '\U0001f510'  # locked with key
    KEY = '\U0001f511'  # key
    OLD_KEY = '\U0001f5dd\ufe0f'  # old key
    HAMMER = '\U0001f528'  # hammer
    AXE = '\U0001fa93'  # axe
    PICK = '\u26cf\ufe0f'  # pick
    HAMMER_AND_PICK = '\u2692\ufe0f'  # hammer and pick
    HAMMER_AND_WRENCH = '\U0001f6e0\ufe0f'  # hammer and wrench
    DAGGER = '\U0001f5e1\ufe0f'  # dagger
    CROSSED_SWORDS = '\u2694\ufe0f'  # crossed swords
    BOMB = '\U0001f4a3'  # bomb
    BOOMERANG = '\U0001fa83'  # boomerang
    BOW_AND_ARROW = '\U0001f3f9'  # bow and arrow
    SHIELD = '\U0001f6e1\ufe0f'  # shield
    CARPENTRY_SAW = '\U0001fa9a'  # carpentry saw
    WRENCH = '\U0001f527'  # wrench
    SCREWDRIVER = '\U0001fa9b'  # screwdriver
    NUT_AND_BOLT = '\U0001f529'  # nut and bolt
    GEAR = '\u2699\ufe0f'  # gear
    CLAMP = '\U0001f5dc\ufe0f'  # clamp
    BALANCE_SCALE = '\u2696\ufe0f'  # balance scale
    WHITE_CANE = '\U0001f9af'  # white cane
    LINK = '\U0001f517'  # link
    BROKEN_CHAIN = '\u26d3\ufe0f\u200d\U0001f4a5'  # broken chain
    CHAINS = '\u26d3\ufe0f'  # chains
    HOOK = '\U0001fa9d'  # hook
    TOOLBOX = '\U0001f9f0'  # toolbox
    MAGNET = '\U0001f9f2'  # magnet
    LADDER = '\U0001fa9c'  # ladder
    ALEMBIC = '\u2697\ufe0f'  # alembic
    TEST_TUBE = '\U0001f9ea'  # test tube
    PETRI_DISH = '\U0001f9eb'  # petri dish
    DNA = '\U0001f9ec'  # dna
    MICROSCOPE = '\U0001f52c'  # microscope
    TELESCOPE = '\U0001f52d'  # telescope
    SATELLITE_ANTENNA = '\U0001f4e1'  # satellite antenna
    SYRINGE = '\U0001f489'  # syringe
    DROP_OF_BLOOD = '\U0001fa78'  # drop of blood
    PILL = '\U0001f48a'  # pill
    ADHESIVE_BANDAGE = '\U0001fa79'  # adhesive bandage
    CRUTCH = '\U0001fa7c'  # crutch
    STETHOSCOPE = '\U0001fa7a'  # stethoscope
    X_RAY = '\U0001fa7b'  # x-ray
    DOOR = '\U0001f6aa'  # door
    ELEVATOR = '\U0001f6d7'  # elevator
    MIRROR = '\U0001fa9e'  # mirror
    WINDOW = '\U0001fa9f'  # window
    BED = '\U0001f6cf\ufe0f'  # bed
    COUCH_AND_LAMP = '\U0001f6cb\ufe0f'  # couch and lamp
    CHAIR = '\U0001fa91'  # chair
    TOILET = '\U0001f6bd'  # toilet
    PLUNGER = '\U0001faa0'  # plunger
    SHOWER = '\U0001f6bf'  # shower
    BATHTUB = '\U0001f6c1'  # bathtub
    MOUSE_TRAP = '\U0001faa4'  # mouse trap
    RAZOR = '\U0001fa92'  # razor
    LOTION_BOTTLE = '\U0001f9f4'  # lotion bottle
    SAFETY_PIN = '\U0001f9f7'  # safety pin
    BROOM = '\U0001f9f9'  # broom
    BASKET = '\U0001f9fa'  # basket
    ROLL_OF_PAPER = '\U0001f9fb'  # roll of paper
    BUCKET = '\U0001faa3'  # bucket
    SOAP = '\U0001f9fc'  # soap
    BUBBLES = '\U0001fae7'  # bubbles
    TOOTHBRUSH = '\U0001faa5'  # toothbrush
    SPONGE = '\U0001f9fd'  # sponge
    FIRE_EXTINGUISHER = '\U0001f9ef'  # fire extinguisher
    SHOPPING_CART = '\U0001f6d2'  # shopping cart
    CIGARETTE = '\U0001f6ac'  # cigarette
    COFFIN = '\u26b0\ufe0f'  # coffin
    HEADSTONE = '\U0001faa6'  # headstone
    FUNERAL_URN = '\u26b1\ufe0f'  # funeral urn
    NAZAR_AMULET = '\U0001f9ff'  # nazar amulet
    HAMSA = '\U0001faac'  # hamsa
    MOAI = '\U0001f5ff'  # moai
    PLACARD = '\U0001faa7'  # placard
    IDENTIFICATION_CARD = '\U0001faaa'  # identification card
    ATM_SIGN = '\U0001f3e7'  # ATM sign
    LITTER_IN_BIN_SIGN = '\U0001f6ae'  # litter in bin sign
    POTABLE_WATER = '\U0001f6b0'  # potable water
    WHEELCHAIR_SYMBOL = '\u267f'  # wheelchair symbol
    MENS_ROOM = '\U0001f6b9'  # men\u2019s room
    WOMENS_ROOM = '\U0001f6ba'  # women\u2019s room
    RESTROOM = '\U0001f6bb'  # restroom
    BABY_SYMBOL = '\U0001f6bc'  # baby symbol
    WATER_CLOSET = '\U0001f6be'  # water closet
    PASSPORT_CONTROL = '\U0001f6c2'  # passport control
    CUSTOMS = '\U0001f6c3'  # customs
    BAGGAGE_CLAIM = '\U0001f6c4'  # baggage claim
    LEFT_LUGGAGE = '\U0001f6c5'  # left luggage
    WARNING = '\u26a0\ufe0f'  # warning
    CHILDREN_CROSSING = '\U0001f6b8'  # children crossing
    NO_ENTRY = '\u26d4'  # no entry
    PROHIBITED = '\U0001f6ab'  # prohibited
    NO_BICYCLES = '\U0001f6b3'  # no bicycles
    NO_SMOKING = '\U0001f6ad'  # no smoking
    NO_LITTERING = '\U0001f6af'  # no littering
    NON_POTABLE_WATER = '\U0001f6b1'  # non-potable water
    NO_PEDESTRIANS = '\U0001f6b7'  # no pedestrians
    NO_MOBILE_PHONES = '\U0001f4f5'  # no mobile phones
    NO_ONE_UNDER_EIGHTEEN = '\U0001f51e'  # no one under eighteen
    RADIOACTIVE = '\u2622\ufe0f'  # radioactive
    BIOHAZARD = '\u2623\ufe0f'  # biohazard
    UP_ARROW = '\u2b06\ufe0f'  # up arrow
    UP_RIGHT_ARROW = '\u2197\ufe0f'  # up-right arrow
    RIGHT_ARROW = '\u27a1\ufe0f'  # right arrow
    DOWN_RIGHT_ARROW = '\u2198\ufe0f'  # down-right arrow
    DOWN_ARROW = '\u2b07\ufe0f'  # down arrow
    DOWN_LEFT_ARROW = '\u2199\ufe0f'  # down-left arrow
    LEFT_ARROW = '\u2b05\ufe0f'  # left arrow
    UP_LEFT_ARROW = '\u2196\ufe0f'  # up-left arrow
    UP_DOWN_ARROW = '\u2195\ufe0f'  # up-down arrow
    LEFT_RIGHT_ARROW = '\u2194\ufe0f'  # left-right arrow
    RIGHT_ARROW_CURVING_LEFT = '\u21a9\ufe0f'  # right arrow curving left
    LEFT_ARROW_CURVING_RIGHT = '\u21aa\ufe0f'  # left arrow curving right
    RIGHT_ARROW_CURVING_UP = '\u2934\ufe0f'  # right arrow curving up
    RIGHT_ARROW_CURVING_DOWN = '\u2935\ufe0f'  # right arrow curving down
    CLOCKWISE_VERTICAL_ARROWS = '\U0001f503'  # clockwise vertical arrows
    COUNTERCLOCKWISE_ARROWS_BUTTON = '\U0001f504'  # counterclockwise arrows button
    BACK_ARROW = '\U0001f519'  # BACK arrow
    END_ARROW = '\U0001f51a'  # END arrow
    ON_ARROW = '\U0001f51b'  # ON! arrow
    SOON_ARROW = '\U0001f51c'  # SOON arrow
    TOP_ARROW = '\U0001f51d'  # TOP arrow
    PLACE_OF_WORSHIP = '\U0001f6d0'  # place of worship
    ATOM_SYMBOL = '\u269b\ufe0f'  # atom symbol
    OM = '\U0001f549\ufe0f'  # om
    STAR_OF_DAVID = '\u2721\ufe0f'  # star of David
    WHEEL_OF_DHARMA = '\u2638\ufe0f'  # wheel of dharma
    YIN_YANG = '\u262f\ufe0f'  # yin yang
    LATIN_CROSS = '\u271d\ufe0f'  # latin cross
    ORTHODOX_CROSS = '\u2626\ufe0f'  # orthodox cross
    STAR_AND_CRESCENT = '\u262a\ufe0f'  # star and crescent
    PEACE_SYMBOL = '\u262e\ufe0f'  # peace symbol
    MENORAH = '\U0001f54e'  # menorah
    DOTTED_SIX_POINTED_STAR = '\U0001f52f'  # dotted six-pointed star
    KHANDA = '\U0001faaf'  # khanda
    ARIES = '\u2648'  # Aries
    TAURUS = '\u2649'  # Taurus
    GEMINI = '\u264a'  # Gemini
    CANCER = '\u264b'  # Cancer
    LEO = '\u264c'  # Leo
    VIRGO = '\u264d'  # Virgo
    LIBRA = '\u264e'  # Libra
    SCORPIO = '\u264f'  # Scorpio
    SAGITTARIUS = '\u2650'  # Sagittarius
    CAPRICORN = '\u2651'  # Capricorn
    AQUARIUS = '\u2652'  # Aquarius
    PISCES = '\u2653'  # Pisces
    OPHIUCHUS = '\u26ce'  # Ophiuchus
    SHUFFLE_TRACKS_BUTTON = '\U0001f500'  # shuffle tracks button
    REPEAT_BUTTON = '\U0001f501'  # repeat button
    REPEAT_SINGLE_BUTTON = '\U0001f502'  # repeat single button
    PLAY_BUTTON = '\u25b6\ufe0f'  # play button
    FAST_FORWARD_BUTTON = '\u23e9'  # fast-forward button
    NEXT_TRACK_BUTTON = '\u23ed\ufe0f'  # next track button
    PLAY_OR_PAUSE_BUTTON = '\u23ef\ufe0f'  # play or pause button
    REVERSE_BUTTON = '\u25c0\ufe0f'  # reverse button
    FAST_REVERSE_BUTTON = '\u23ea'  # fast reverse button
    LAST_TRACK_BUTTON = '\u23ee\ufe0f'  # last track button
    UPWARDS_BUTTON = '\U0001f53c'  # upwards button
    FAST_UP_BUTTON = '\u23eb'  # fast up button
    DOWNWARDS_BUTTON = '\U0001f53d'  # downwards button
    FAST_DOWN_BUTTON = '\u23ec'  # fast down button
    PAUSE_BUTTON = '\u23f8\ufe0f'  # pause button
    STOP_BUTTON = '\u23f9\ufe0f'  # stop button
    RECORD_BUTTON = '\u23fa\ufe0f'  # record button
    EJECT_BUTTON = '\u23cf\ufe0f'  # eject button
    CINEMA = '\U0001f3a6'  # cinema
    DIM_BUTTON = '\U0001f505'  # dim button
    BRIGHT_BUTTON = '\U0001f506'  # bright button
    ANTENNA_BARS = '\U0001f4f6'  # antenna bars
    WIRELESS = '\U0001f6dc'  # wireless
    VIBRATION_MODE = '\U0001f4f3'  # vibration mode
    MOBILE_PHONE_OFF = '\U0001f4f4'  # mobile phone off
    FEMALE_SIGN = '\u2640\ufe0f'  # female sign
    MALE_SIGN = '\u2642\ufe0f'  # male sign
    TRANSGENDER_SYMBOL = '\u26a7\ufe0f'  # transgender symbol
    MULTIPLY = '\u2716\ufe0f'  # multiply
    PLUS = '\u2795'  # plus
    MINUS = '\u2796'  # minus
    DIVIDE = '\u2797'  # divide
    HEAVY_EQUALS_SIGN = '\U0001f7f0'  # heavy equals sign
    INFINITY = '\u267e\ufe0f'  # infinity
    DOUBLE_EXCLAMATION_MARK = '\u203c\ufe0f'  # double exclamation mark
    EXCLAMATION_QUESTION_MARK = '\u2049\ufe0f'  # exclamation question mark
    RED_QUESTION_MARK = '\u2753'  # red question mark
    WHITE_QUESTION_MARK = '\u2754'  # white question mark
    WHITE_EXCLAMATION_MARK = '\u2755'  # white exclamation mark
    RED_EXCLAMATION_MARK = '\u2757'  # red exclamation mark
    WAVY_DASH = '\u3030\ufe0f'  # wavy dash
    CURRENCY_EXCHANGE = '\U0001f4b1'  # currency exchange
    HEAVY_DOLLAR_SIGN = '\U0001f4b2'  # heavy dollar sign
    MEDICAL_SYMBOL = '\u2695\ufe0f'  # medical symbol
    RECYCLING_SYMBOL = '\u267b\ufe0f'  # recycling symbol
    FLEUR_DE_LIS = '\u269c\ufe0f'  # fleur-de-lis
    TRIDENT_EMBLEM = '\U0001f531'  # trident emblem
    NAME_BADGE = '\U0001f4db'  # name badge
    JAPANESE_SYMBOL_FOR_BEGINNER = '\U0001f530'  # Japanese symbol for beginner
    HOLLOW_RED_CIRCLE = '\u2b55'  # hollow red circle
    CHECK_MARK_BUTTON = '\u2705'  # check mark button
    CHECK_BOX_WITH_CHECK = '\u2611\ufe0f'  # check box with check
    CHECK_MARK = '\u2714\ufe0f'  # check mark
    CROSS_MARK = '\u274c'  # cross mark
    CROSS_MARK_BUTTON = '\u274e'  # cross mark button
    CURLY_LOOP = '\u27b0'  # curly loop
    DOUBLE_CURLY_LOOP = '\u27bf'  # double curly loop
    PART_ALTERNATION_MARK = '\u303d\ufe0f'  # part alternation mark
    EIGHT_SPOKED_ASTERISK = '\u2733\ufe0f'  # eight-spoked asterisk
    EIGHT_POINTED_STAR = '\u2734\ufe0f'  # eight-pointed star
    SPARKLE = '\u2747\ufe0f'  # sparkle
    COPYRIGHT = '\xa9\ufe0f'  # copyright
    REGISTERED = '\xae\ufe0f'  # registered
    TRADE_MARK = '\u2122\ufe0f'  # trade mark
    KEYCAP_NUMBER_SIGN = '#\ufe0f\u20e3'  # keycap: #
    KEYCAP_ASTERISK = '*\ufe0f\u20e3'  # keycap: *
    KEYCAP_0 = '0\ufe0f\u20e3'  # keycap: 0
    KEYCAP_1 = '1\ufe0f\u20e3'  # keycap: 1
    KEYCAP_2 = '2\ufe0f\u20e3'  # keycap: 2
    KEYCAP_3 = '3\ufe0f\u20e3'  # keycap: 3
    KEYCAP_4 = '4\ufe0f\u20e3'  # keycap: 4
    KEYCAP_5 = '5\ufe0f\u20e3'  # keycap: 5
    KEYCAP_6 = '6\ufe0f\u20e3'  # keycap: 6
    KEYCAP_7 = '7\ufe0f\u20e3'  # keycap: 7
    KEYCAP_8 = '8\ufe0f\u20e3'  # keycap: 8
    KEYCAP_9 = '9\ufe0f\u20e3'  # keycap: 9
    KEYCAP_10 = '\U0001f51f'  # keycap: 10
    INPUT_LATIN_UPPERCASE = '\U0001f520'  # input latin uppercase
    INPUT_LATIN_LOWERCASE = '\U0001f521'  # input latin lowercase
    INPUT_NUMBERS = '\U0001f522'  # input numbers
    INPUT_SYMBOLS = '\U0001f523'  # input symbols
    INPUT_LATIN_LETTERS = '\U0001f524'  # input latin letters
    A_BUTTON_BLOOD_TYPE = '\U0001f170\ufe0f'  # A button (blood type)
    AB_BUTTON_BLOOD_TYPE = '\U0001f18e'  # AB button (blood type)
    B_BUTTON_BLOOD_TYPE = '\U0001f171\ufe0f'  # B button (blood type)
    CL_BUTTON = '\U0001f191'  # CL button
    COOL_BUTTON = '\U0001f192'  # COOL button
    FREE_BUTTON = '\U0001f193'  # FREE button
    INFORMATION = '\u2139\ufe0f'  # information
    ID_BUTTON = '\U0001f194'  # ID button
    CIRCLED_M = '\u24c2\ufe0f'  # circled M
    NEW_BUTTON = '\U0001f195'  # NEW button
    NG_BUTTON = '\U0001f196'  # NG button
    O_BUTTON_BLOOD_TYPE = '\U0001f17e\ufe0f'  # O button (blood type)
    OK_BUTTON = '\U0001f197'  # OK button
    P_BUTTON = '\U0001f17f\ufe0f'  # P button
    SOS_BUTTON = '\U0001f198'  # SOS button
    UP_BUTTON = '\U0001f199'  # UP! button
    VS_BUTTON = '\U0001f19a'  # VS button
    JAPANESE_HERE_BUTTON = '\U0001f201'  # Japanese \u201chere\u201d button
    JAPANESE_SERVICE_CHARGE_BUTTON = '\U0001f202\ufe0f'  # Japanese \u201cservice charge\u201d button
    JAPANESE_MONTHLY_AMOUNT_BUTTON = '\U0001f237\ufe0f'  # Japanese \u201cmonthly amount\u201d button
    JAPANESE_NOT_FREE_OF_CHARGE_BUTTON = '\U0001f236'  # Japanese \u201cnot free of charge\u201d button
    JAPANESE_RESERVED_BUTTON = '\U0001f22f'  # Japanese \u201creserved\u201d button
    JAPANESE_BARGAIN_BUTTON = '\U0001f250'  # Japanese \u201cbargain\u201d button
    JAPANESE_DISCOUNT_BUTTON = '\U0001f239'  # Japanese \u201cdiscount\u201d button
    JAPANESE_FREE_OF_CHARGE_BUTTON = '\U0001f21a'  # Japanese \u201cfree of charge\u201d button
    JAPANESE_PROHIBITED_BUTTON = '\U0001f232'  # Japanese \u201cprohibited\u201d button
    JAPANESE_ACCEPTABLE_BUTTON = '\U0001f251'  # Japanese \u201cacceptable\u201d button
    JAPANESE_APPLICATION_BUTTON = '\U0001f238'  # Japanese \u201capplication\u201d button
    JAPANESE_PASSING_GRADE_BUTTON = '\U0001f234'  # Japanese \u201cpassing grade\u201d button
    JAPANESE_VACANCY_BUTTON = '\U0001f233'  # Japanese \u201cvacancy\u201d button
    JAPANESE_CONGRATULATIONS_BUTTON = '\u3297\ufe0f'  # Japanese \u201ccongratulations\u201d button
    JAPANESE_SECRET_BUTTON = '\u3299\ufe0f'  # Japanese \u201csecret\u201d button
    JAPANESE_OPEN_FOR_BUSINESS_BUTTON = '\U0001f23a'  # Japanese \u201copen for business\u201d button
    JAPANESE_NO_VACANCY_BUTTON = '\U0001f235'  # Japanese \u201cno vacancy\u201d button
    RED_CIRCLE = '\U0001f534'  # red circle
    ORANGE_CIRCLE = '\U0001f7e0'  # orange circle
    YELLOW_CIRCLE = '\U0001f7e1'  # yellow circle
    GREEN_CIRCLE = '\U0001f7e2'  # green circle
    BLUE_CIRCLE = '\U0001f535'  # blue circle
    PURPLE_CIRCLE = '\U0001f7e3'  # purple circle
    BROWN_CIRCLE = '\U0001f7e4'  # brown circle
    BLACK_CIRCLE = '\u26ab'  # black circle
    WHITE_CIRCLE = '\u26aa'  # white circle
    RED_SQUARE = '\U0001f7e5'  # red square
    ORANGE_SQUARE = '\U0001f7e7'  # orange square
    YELLOW_SQUARE = '\U0001f7e8'  # yellow square
    GREEN_SQUARE = '\U0001f7e9'  # green square
    BLUE_SQUARE = '\U0001f7e6'  # blue square
    PURPLE_SQUARE = '\U0001f7ea'  # purple square
    BROWN_SQUARE = '\U0001f7eb'  # brown square
    BLACK_LARGE_SQUARE = '\u2b1b'  # black large square
    WHITE_LARGE_SQUARE = '\u2b1c'  # white large square
    BLACK_MEDIUM_SQUARE = '\u25fc\ufe0f'  # black medium square
    WHITE_MEDIUM_SQUARE = '\u25fb\ufe0f'  # white medium square
    BLACK_MEDIUM_SMALL_SQUARE = '\u25fe'  # black medium-small square
    WHITE_MEDIUM_SMALL_SQUARE = '\u25fd'  # white medium-small square
    BLACK_SMALL_SQUARE = '\u25aa\ufe0f'  # black small square
    WHITE_SMALL_SQUARE = '\u25ab\ufe0f'  # white small square
    LARGE_ORANGE_DIAMOND = '\U0001f536'  # large orange diamond
    LARGE_BLUE_DIAMOND = '\U0001f537'  # large blue diamond
    SMALL_ORANGE_DIAMOND = '\U0001f538'  # small orange diamond
    SMALL_BLUE_DIAMOND = '\U0001f539'  # small blue diamond
    RED_TRIANGLE_POINTED_UP = '\U0001f53a'  # red triangle pointed up
    RED_TRIANGLE_POINTED_DOWN = '\U0001f53b'  # red triangle pointed down
    DIAMOND_WITH_A_DOT = '\U0001f4a0'  # diamond with a dot
    RADIO_BUTTON = '\U0001f518'  # radio button
    WHITE_SQUARE_BUTTON = '\U0001f533'  # white square button
    BLACK_SQUARE_BUTTON = '\U0001f532'  # black square button
    CHEQUERED_FLAG = '\U0001f3c1'  # chequered flag
    TRIANGULAR_FLAG = '\U0001f6a9'  # triangular flag
    CROSSED_FLAGS = '\U0001f38c'  # crossed flags
    BLACK_FLAG = '\U0001f3f4'  # black flag
    WHITE_FLAG = '\U0001f3f3\ufe0f'  # white flag
    RAINBOW_FLAG = '\U0001f3f3\ufe0f\u200d\U0001f308'  # rainbow flag
    TRANSGENDER_FLAG = '\U0001f3f3\ufe0f\u200d\u26a7\ufe0f'  # transgender flag
    PIRATE_FLAG = '\U0001f3f4\u200d\u2620\ufe0f'  # pirate flag
    FLAG_ASCENSION_ISLAND = '\U0001f1e6\U0001f1e8'  # flag: Ascension Island
    FLAG_ANDORRA = '\U0001f1e6\U0001f1e9'  # flag: Andorra
    FLAG_UNITED_ARAB_EMIRATES = '\U0001f1e6\U0001f1ea'  # flag: United Arab Emirates
    FLAG_AFGHANISTAN = '\U0001f1e6\U0001f1eb'  # flag: Afghanistan
    FLAG_ANTIGUA_AND_BARBUDA = '\U0001f1e6\U0001f1ec'  # flag: Antigua & Barbuda
    FLAG_ANGUILLA = '\U0001f1e6\U0001f1ee'  # flag: Anguilla
    FLAG_ALBANIA = '\U0001f1e6\U0001f1f1'  # flag: Albania
    FLAG_ARMENIA = '\U0001f1e6\U0001f1f2'  # flag: Armenia
    FLAG_ANGOLA = '\U0001f1e6\U0001f1f4'  # flag: Angola
    FLAG_ANTARCTICA = '\U0001f1e6\U0001f1f6'  # flag: Antarctica
    FLAG_ARGENTINA = '\U0001f1e6\U0001f1f7'  # flag: Argentina
    FLAG_AMERICAN_SAMOA = '\U0001f1e6\U0001f1f8'  # flag: American Samoa
    FLAG_AUSTRIA = '\U0001f1e6\U0001f1f9'  # flag: Austria
    FLAG_AUSTRALIA = '\U0001f1e6\U0001f1fa'  # flag: Australia
    FLAG_ARUBA = '\U0001f1e6\U0001f1fc'  # flag: Aruba
    FLAG_ALAND_ISLANDS = '\U0001f1e6\U0001f1fd'  # flag: \xc5land Islands
    FLAG_AZERBAIJAN = '\U0001f1e6\U0001f1ff'  # flag: Azerbaijan
    FLAG_BOSNIA_AND_HERZEGOVINA = '\U0001f1e7\U0001f1e6'  # flag: Bosnia & Herzegovina
    FLAG_BARBADOS = '\U0001f1e7\U0001f1e7'  # flag: Barbados
    FLAG_BANGLADESH = '\U0001f1e7\U0001f1e9'  # flag: Bangladesh
    FLAG_BELGIUM = '\U0001f1e7\U0001f1ea'  # flag: Belgium
    FLAG_BURKINA_FASO = '\U0001f1e7\U0001f1eb'  # flag: Burkina Faso
    FLAG_BULGARIA = '\U0001f1e7\U0001f1ec'  # flag: Bulgaria
    FLAG_BAHRAIN = '\U0001f1e7\U0001f1ed'  # flag: Bahrain
    FLAG_BURUNDI = '\U0001f1e7\U0001f1ee'  # flag: Burundi
    FLAG_BENIN = '\U0001f1e7\U0001f1ef'  # flag: Benin
    FLAG_ST_BARTHELEMY = '\U0001f1e7\U0001f1f1'  # flag: St. Barth\xe9lemy
    FLAG_BERMUDA = '\U0001f1e7\U0001f1f2'  # flag: Bermuda
    FLAG_BRUNEI = '\U0001f1e7\U0001f1f3'  # flag: Brunei
    FLAG_BOLIVIA = '\U0001f1e7\U0001f1f4'  # flag: Bolivia
    FLAG_CARIBBEAN_NETHERLANDS = '\U0001f1e7\U0001f1f6'  # flag: Caribbean Netherlands
    FLAG_BRAZIL = '\U0001f1e7\U0001f1f7'  # flag: Brazil
    FLAG_BAHAMAS = '\U0001f1e7\U0001f1f8'  # flag: Bahamas
    FLAG_BHUTAN = '\U0001f1e7\U0001f1f9'  # flag: Bhutan
    FLAG_BOUVET_ISLAND = '\U0001f1e7\U0001f1fb'  # flag: Bouvet Island
    FLAG_BOTSWANA = '\U0001f1e7\U0001f1fc'  # flag: Botswana
    FLAG_BELARUS = '\U0001f1e7\U0001f1fe'  # flag: Belarus
    FLAG_BELIZE = '\U0001f1e7\U0001f1ff'  # flag: Belize
    FLAG_CANADA = '\U0001f1e8\U0001f1e6'  # flag: Canada
    FLAG_COCOS_KEELING_ISLANDS = '\U0001f1e8\U0001f1e8'  # flag: Cocos (Keeling) Islands
    FLAG_CONGO_KINSHASA = '\U0001f1e8\U0001f1e9'  # flag: Congo - Kinshasa
    FLAG_CENTRAL_AFRICAN_REPUBLIC = '\U0001f1e8\U0001f1eb'  # flag: Central African Republic
    FLAG_CONGO_BRAZZAVILLE = '\U0001f1e8\U0001f1ec'  # flag: Congo - Brazzaville
    FLAG_SWITZERLAND = '\U0001f1e8\U0001f1ed'  # flag: Switzerland
    FLAG_COTE_DIVOIRE = '\U0001f1e8\U0001f1ee'  # flag: C\xf4te d\u2019Ivoire
    FLAG_COOK_ISLANDS = '\U0001f1e8\U0001f1f0'  # flag: Cook Islands
    FLAG_CHILE = '\U0001f1e8\U0001f1f1'  # flag: Chile
    FLAG_CAMEROON = '\U0001f1e8\U0001f1f2'  # flag: Cameroon
    FLAG_CHINA = '\U0001f1e8\U0001f1f3'  # flag: China
    FLAG_COLOMBIA = '\U0001f1e8\U0001f1f4'  # flag: Colombia
    FLAG_CLIPPERTON_ISLAND = '\U0001f1e8\U0001f1f5'  # flag: Clipperton Island
    FLAG_COSTA_RICA = '\U0001f1e8\U0001f1f7'  # flag: Costa Rica
    FLAG_CUBA = '\U0001f1e8\U0001f1fa'  # flag: Cuba
    FLAG_CAPE_VERDE = '\U0001f1e8\U0001f1fb'  # flag: Cape Verde
    FLAG_CURACAO = '\U0001f1e8\U0001f1fc'  # flag: Cura\xe7ao
    FLAG_CHRISTMAS_ISLAND = '\U0001f1e8\U0001f1fd'  # flag: Christmas Island
    FLAG_CYPRUS = '\U0001f1e8\U0001f1fe'  # flag: Cyprus
    FLAG_CZECHIA = '\U0001f1e8\U0001f1ff'  # flag: Czechia
    FLAG_GERMANY = '\U0001f1e9\U0001f1ea'  # flag: Germany
    FLAG_DIEGO_GARCIA = '\U0001f1e9\U0001f1ec'  # flag: Diego Garcia
    FLAG_DJIBOUTI = '\U0001f1e9\U0001f1ef'  # flag: Djibouti
    FLAG_DENMARK = '\U0001f1e9\U0001f1f0'  # flag: Denmark
    FLAG_DOMINICA = '\U0001f1e9\U0001f1f2'  # flag: Dominica
    FLAG_DOMINICAN_REPUBLIC = '\U0001f1e9\U0001f1f4'  # flag: Dominican Republic
    FLAG_ALGERIA = '\U0001f1e9\U0001f1ff'  # flag: Algeria
    FLAG_CEUTA_AND_MELILLA = '\U0001f1ea\U0001f1e6'  # flag: Ceuta & Melilla
    FLAG_ECUADOR = '\U0001f1ea\U0001f1e8'  # flag: Ecuador
    FLAG_ESTONIA = '\U0001f1ea\U0001f1ea'  # flag: Estonia
    FLAG_EGYPT = '\U0001f1ea\U0001f1ec'  # flag: Egypt
    FLAG_WESTERN_SAHARA = '\U0001f1ea\U0001f1ed'  # flag: Western Sahara
    FLAG_ERITREA = '\U0001f1ea\U0001f1f7'  # flag: Eritrea
    FLAG_SPAIN = '\U0001f1ea\U0001f1f8'  # flag: Spain
    FLAG_ETHIOPIA = '\U0001f1ea\U0001f1f9'  # flag: Ethiopia
    FLAG_EUROPEAN_UNION = '\U0001f1ea\U0001f1fa'  # flag: European Union
    FLAG_FINLAND = '\U0001f1eb\U0001f1ee'  # flag: Finland
    FLAG_FIJI = '\U0001f1eb\U0001f1ef'  # flag: Fiji
    FLAG_FALKLAND_ISLANDS = '\U0001f1eb\U0001f1f0'  # flag: Falkland Islands
    FLAG_MICRONESIA = '\U0001f1eb\U0001f1f2'  # flag: Micronesia
    FLAG_FAROE_ISLANDS = '\U0001f1eb\U0001f1f4'  # flag: Faroe Islands
    FLAG_FRANCE = '\U0001f1eb\U0001f1f7'  # flag: France
    FLAG_GABON = '\U0001f1ec\U0001f1e6'  # flag: Gabon
    FLAG_UNITED_KINGDOM = '\U0001f1ec\U0001f1e7'  # flag: United Kingdom
    FLAG_GRENADA = '\U0001f1ec\U0001f1e9'  # flag: Grenada
    FLAG_GEORGIA = '\U0001f1ec\U0001f1ea'  # flag: Georgia
    FLAG_FRENCH_GUIANA = '\U0001f1ec\U0001f1eb'  # flag: French Guiana
    FLAG_GUERNSEY = '\U0001f1ec\U0001f1ec'  # flag: Guernsey
    FLAG_GHANA = '\U0001f1ec\U0001f1ed'  # flag: Ghana
    FLAG_GIBRALTAR = '\U0001f1ec\U0001f1ee'  # flag: Gibraltar
    FLAG_GREENLAND = '\U0001f1ec\U0001f1f1'  # flag: Greenland
    FLAG_GAMBIA = '\U0001f1ec\U0001f1f2'  # flag: Gambia
    FLAG_GUINEA = '\U0001f1ec\U0001f1f3'  # flag: Guinea
    FLAG_GUADELOUPE = '\U0001f1ec\U0001f1f5'  # flag: Guadeloupe
    FLAG_EQUATORIAL_GUINEA = '\U0001f1ec\U0001f1f6'  # flag: Equatorial Guinea
    FLAG_GREECE = '\U0001f1ec\U0001f1f7'  # flag: Greece
    FLAG_SOUTH_GEORGIA_AND_SOUTH_SANDWICH_ISLANDS = '\U0001f1ec\U0001f1f8'  # flag: South Georgia & South Sandwich Islands
    FLAG_GUATEMALA = '\U0001f1ec\U0001f1f9'  # flag: Guatemala
    FLAG_GUAM = '\U0001f1ec\U0001f1fa'  # flag: Guam
    FLAG_GUINEA_BISSAU = '\U0001f1ec\U0001f1fc'  # flag: Guinea-Bissau
    FLAG_GUYANA = '\U0001f1ec\U0001f1fe'  # flag: Guyana
    FLAG_HONG_KONG_SAR_CHINA = '\U0001f1ed\U0001f1f0'  # flag: Hong Kong SAR China
    FLAG_HEARD_AND_MCDONALD_ISLANDS = '\U0001f1ed\U0001f1f2'  # flag: Heard & McDonald Islands
    FLAG_HONDURAS = '\U0001f1ed\U0001f1f3'  # flag: Honduras
    FLAG_CROATIA = '\U0001f1ed\U0001f1f7'  # flag: Croatia
    FLAG_HAITI = '\U0001f1ed\U0001f1f9'  # flag: Haiti
    FLAG_HUNGARY = '\U0001f1ed\U0001f1fa'  # flag: Hungary
    FLAG_CANARY_ISLANDS = '\U0001f1ee\U0001f1e8'  # flag: Canary Islands
    FLAG_INDONESIA = '\U0001f1ee\U0001f1e9'  # flag: Indonesia
    FLAG_IRELAND = '\U0001f1ee\U0001f1ea'  # flag: Ireland
    FLAG_ISRAEL = '\U0001f1ee\U0001f1f1'  # flag: Israel
    FLAG_ISLE_OF_MAN = '\U0001f1ee\U0001f1f2'  # flag: Isle of Man
    FLAG_INDIA = '\U0001f1ee\U0001f1f3'  # flag: India
    FLAG_BRITISH_INDIAN_OCEAN_TERRITORY = '\U0001f1ee\U0001f1f4'  # flag: British Indian Ocean Territory
    FLAG_IRAQ = '\U0001f1ee\U0001f1f6'  # flag: Iraq
    FLAG_IRAN = '\U0001f1ee\U0001f1f7'  # flag: Iran
    FLAG_ICELAND = '\U0001f1ee\U0001f1f8'  # flag: Iceland
    FLAG_ITALY = '\U0001f1ee\U0001f1f9'  # flag: Italy
    FLAG_JERSEY = '\U0001f1ef\U0001f1ea'  # flag: Jersey
    FLAG_JAMAICA = '\U0001f1ef\U0001f1f2'  # flag: Jamaica
    FLAG_JORDAN = '\U0001f1ef\U0001f1f4'  # flag: Jordan
    FLAG_JAPAN = '\U0001f1ef\U0001f1f5'  # flag: Japan
    FLAG_KENYA = '\U0001f1f0\U0001f1ea'  # flag: Kenya
    FLAG_KYRGYZSTAN = '\U0001f1f0\U0001f1ec'  # flag: Kyrgyzstan
    FLAG_CAMBODIA = '\U0001f1f0\U0001f1ed'  # flag: Cambodia
    FLAG_KIRIBATI = '\U0001f1f0\U0001f1ee'  # flag: Kiribati
    FLAG_COMOROS = '\U0001f1f0\U0001f1f2'  # flag: Comoros
    FLAG_ST_KITTS_AND_NEVIS = '\U0001f1f0\U0001f1f3'  # flag: St. Kitts & Nevis
    FLAG_NORTH_KOREA = '\U0001f1f0\U0001f1f5'  # flag: North Korea
    FLAG_SOUTH_KOREA = '\U0001f1f0\U0001f1f7'  # flag: South Korea
    FLAG_KUWAIT = '\U0001f1f0\U0001f1fc'  # flag: Kuwait
    FLAG_CAYMAN_ISLANDS = '\U0001f1f0\U0001f1fe'  # flag: Cayman Islands
    FLAG_KAZAKHSTAN = '\U0001f1f0\U0001f1ff'  # flag: Kazakhstan
    FLAG_LAOS = '\U0001f1f1\U0001f1e6'  # flag: Laos
    FLAG_LEBANON = '\U0001f1f1\U0001f1e7'  # flag: Lebanon
    FLAG_ST_LUCIA = '\U0001f1f1\U0001f1e8'  # flag: St. Lucia
    FLAG_LIECHTENSTEIN = '\U0001f1f1\U0001f1ee'  # flag: Liechtenstein
    FLAG_SRI_LANKA = '\U0001f1f1\U0001f1f0'  # flag: Sri Lanka
    FLAG_LIBERIA = '\U0001f1f1\U0001f1f7'  # flag: Liberia
    FLAG_LESOTHO = '\U0001f1f1\U0001f1f8'  # flag: Lesotho
    FLAG_LITHUANIA = '\U0001f1f1\U0001f1f9'  # flag: Lithuania
    FLAG_LUXEMBOURG = '\U0001f1f1\U0001f1fa'  # flag: Luxembourg
    FLAG_LATVIA = '\U0001f1f1\U0001f1fb'  # flag: Latvia
    FLAG_LIBYA = '\U0001f1f1\U0001f1fe'  # flag: Libya
    FLAG_MOROCCO = '\U0001f1f2\U0001f1e6'  # flag: Morocco
    FLAG_MONACO = '\U0001f1f2\U0001f1e8'  # flag: Monaco
    FLAG_MOLDOVA = '\U0001f1f2\U0001f1e9'  # flag: Moldova
    FLAG_MONTENEGRO = '\U0001f1f2\U0001f1ea'  # flag: Montenegro
    FLAG_ST_MARTIN = '\U0001f1f2\U0001f1eb'  # flag: St. Martin
    FLAG_MADAGASCAR = '\U0001f1f2\U0001f1ec'  # flag: Madagascar
    FLAG_MARSHALL_ISLANDS = '\U0001f1f2\U0001f1ed'  # flag: Marshall Islands
    FLAG_NORTH_MACEDONIA = '\U0001f1f2\U0001f1f0'  # flag: North Macedonia
    FLAG_MALI = '\U0001f1f2\U0001f1f1'  # flag: Mali
    FLAG_MYANMAR_BURMA = '\U0001f1f2\U0001f1f2'  # flag: Myanmar (Burma)
    FLAG_MONGOLIA = '\U0001f1f2\U0001f1f3'  # flag: Mongolia
    FLAG_MACAO_SAR_CHINA = '\U0001f1f2\U0001f1f4'  # flag: Macao SAR China
    FLAG_NORTHERN_MARIANA_ISLANDS = '\U0001f1f2\U0001f1f5'  # flag: Northern Mariana Islands
    FLAG_MARTINIQUE = '\U0001f1f2\U0001f1f6'  # flag: Martinique
    FLAG_MAURITANIA = '\U0001f1f2\U0001f1f7'  # flag: Mauritania
    FLAG_MONTSERRAT = '\U0001f1f2\U0001f1f8'  # flag: Montserrat
    FLAG_MALTA = '\U0001f1f2\U0001f1f9'  # flag: Malta
    FLAG_MAURITIUS = '\U0001f1f2\U0001f1fa'  # flag: Mauritius
    FLAG_MALDIVES = '\U0001f1f2\U0001f1fb'  # flag: Maldives
    FLAG_MALAWI = '\U0001f1f2\U0001f1fc'  # flag: Malawi
    FLAG_MEXICO = '\U0001f1f2\U0001f1fd'  # flag: Mexico
    FLAG_MALAYSIA = '\U0001f1f2\U0001f1fe'  # flag: Malaysia
    FLAG_MOZAMBIQUE = '\U0001f1f2\U0001f1ff'  # flag: Mozambique
    FLAG_NAMIBIA = '\U0001f1f3\U0001f1e6'  # flag: Namibia
    FLAG_NEW_CALEDONIA = '\U0001f1f3\U0001f1e8'  # flag: New Caledonia
    FLAG_NIGER = '\U0001f1f3\U0001f1ea'  # flag: Niger
    FLAG_NORFOLK_ISLAND = '\U0001f1f3\U0001f1eb'  # flag: Norfolk Island
    FLAG_NIGERIA = '\U0001f1f3\U0001f1ec'  # flag: Nigeria
    FLAG_NICARAGUA = '\U0001f1f3\U0001f1ee'  # flag: Nicaragua
    FLAG_NETHERLANDS = '\U0001f1f3\U0001f1f1'  # flag: Netherlands
    FLAG_NORWAY = '\U0001f1f3\U0001f1f4'  # flag: Norway
    FLAG_NEPAL = '\U0001f1f3\U0001f1f5'  # flag: Nepal
    FLAG_NAURU = '\U0001f1f3\U0001f1f7'  # flag: Nauru
    FLAG_NIUE = '\U0001f1f3\U0001f1fa'  # flag: Niue
    FLAG_NEW_ZEALAND = '\U0001f1f3\U0001f1ff'  # flag: New Zealand
    FLAG_OMAN = '\U0001f1f4\U0001f1f2'  # flag: Oman
    FLAG_PANAMA = '\U0001f1f5\U0001f1e6'  # flag: Panama
    FLAG_PERU = '\U0001f1f5\U0001f1ea'  # flag: Peru
    FLAG_FRENCH_POLYNESIA = '\U0001f1f5\U0001f1eb'  # flag: French Polynesia
    FLAG_PAPUA_NEW_GUINEA = '\U0001f1f5\U0001f1ec'  # flag: Papua New Guinea
    FLAG_PHILIPPINES = '\U0001f1f5\U0001f1ed'  # flag: Philippines
    FLAG_PAKISTAN = '\U0001f1f5\U0001f1f0'  # flag: Pakistan
    FLAG_POLAND = '\U0001f1f5\U0001f1f1'  # flag: Poland
    FLAG_ST_PIERRE_AND_MIQUELON = '\U0001f1f5\U0001f1f2'  # flag: St. Pierre & Miquelon
    FLAG_PITCAIRN_ISLANDS = '\U0001f1f5\U0001f1f3'  # flag: Pitcairn Islands
    FLAG_PUERTO_RICO = '\U0001f1f5\U0001f1f7'  # flag: Puerto Rico
    FLAG_PALESTINIAN_TERRITORIES = '\U0001f1f5\U0001f1f8'  # flag: Palestinian Territories
    FLAG_PORTUGAL = '\U0001f1f5\U0001f1f9'  # flag: Portugal
    FLAG_PALAU = '\U0001f1f5\U0001f1fc'  # flag: Palau
    FLAG_PARAGUAY = '\U0001f1f5\U0001f1fe'  # flag: Paraguay
    FLAG_QATAR = '\U0001f1f6\U0001f1e6'  # flag: Qatar
    FLAG_REUNION = '\U0001f1f7\U0001f1ea'  # flag: R\xe9union
    FLAG_ROMANIA = '\U0001f1f7\U0001f1f4'  # flag: Romania
    FLAG_SERBIA = '\U0001f1f7\U0001f1f8'  # flag: Serbia
    FLAG_RUSSIA = '\U0001f1f7\U0001f1fa'  # flag: Russia
    FLAG_RWANDA = '\U0001f1f7\U0001f1fc'  # flag: Rwanda
    FLAG_SAUDI_ARABIA = '\U0001f1f8\U0001f1e6'  # flag: Saudi Arabia
    FLAG_SOLOMON_ISLANDS = '\U0001f1f8\U0001f1e7'  # flag: Solomon Islands
    FLAG_SEYCHELLES = '\U0001f1f8\U0001f1e8'  # flag: Seychelles
    FLAG_SUDAN = '\U0001f1f8\U0001f1e9'  # flag: Sudan
    FLAG_SWEDEN = '\U0001f1f8\U0001f1ea'  # flag: Sweden
    FLAG_SINGAPORE = '\U0001f1f8\U0001f1ec'  # flag: Singapore
    FLAG_ST_HELENA = '\U0001f1f8\U0001f1ed'  # flag: St. Helena
    FLAG_SLOVENIA = '\U0001f1f8\U0001f1ee'  # flag: Slovenia
    FLAG_SVALBARD_AND_JAN_MAYEN = '\U0001f1f8\U0001f1ef'  # flag: Svalbard & Jan Mayen
    FLAG_SLOVAKIA = '\U0001f1f8\U0001f1f0'  # flag: Slovakia
    FLAG_SIERRA_LEONE = '\U0001f1f8\U0001f1f1'  # flag: Sierra Leone
    FLAG_SAN_MARINO = '\U0001f1f8\U0001f1f2'  # flag: San Marino
    FLAG_SENEGAL = '\U0001f1f8\U0001f1f3'  # flag: Senegal
    FLAG_SOMALIA = '\U0001f1f8\U0001f1f4'  # flag: Somalia
    FLAG_SURINAME = '\U0001f1f8\U0001f1f7'  # flag: Suriname
    FLAG_SOUTH_SUDAN = '\U0001f1f8\U0001f1f8'  # flag: South Sudan
    FLAG_SAO_TOME_AND_PRINCIPE = '\U0001f1f8\U0001f1f9'  # flag: S\xe3o Tom\xe9 & Pr\xedncipe
    FLAG_EL_SALVADOR = '\U0001f1f8\U0001f1fb'  # flag: El Salvador
    FLAG_SINT_MAARTEN = '\U0001f1f8\U0001f1fd'  # flag: Sint Maarten
    FLAG_SYRIA = '\U0001f1f8\U0001f1fe'  # flag: Syria
    FLAG_ESWATINI = '\U0001f1f8\U0001f1ff'  # flag: Eswatini
    FLAG_TRISTAN_DA_CUNHA = '\U0001f1f9\U0001f1e6'  # flag: Tristan da Cunha
    FLAG_TURKS_AND_CAICOS_ISLANDS = '\U0001f1f9\U0001f1e8'  # flag: Turks & Caicos Islands
    FLAG_CHAD = '\U0001f1f9\U0001f1e9'  # flag: Chad
    FLAG_FRENCH_SOUTHERN_TERRITORIES = '\U0001f1f9\U0001f1eb'  # flag: French Southern Territories
    FLAG_TOGO = '\U0001f1f9\U0001f1ec'  # flag: Togo
    FLAG_THAILAND = '\U0001f1f9\U0001f1ed'  # flag: Thailand
    FLAG_TAJIKISTAN = '\U0001f1f9\U0001f1ef'  # flag: Tajikistan
    FLAG_TOKELAU = '\U0001f1f9\U0001f1f0'  # flag: Tokelau
    FLAG_TIMOR_LESTE = '\U0001f1f9\U0001f1f1'  # flag: Timor-Leste
    FLAG_TURKMENISTAN = '\U0001f1f9\U0001f1f2'  # flag: Turkmenistan
    FLAG_TUNISIA = '\U0001f1f9\U0001f1f3'  # flag: Tunisia
    FLAG_TONGA = '\U0001f1f9\U0001f1f4'  # flag: Tonga
    FLAG_TURKIYE = '\U0001f1f9\U0001f1f7'  # flag: T\xfcrkiye
    FLAG_TRINIDAD_AND_TOBAGO = '\U0001f1f9\U0001f1f9'  # flag: Trinidad & Tobago
    FLAG_TUVALU = '\U0001f1f9\U0001f1fb'  # flag: Tuvalu
    FLAG_TAIWAN = '\U0001f1f9\U0001f1fc'  # flag: Taiwan
    FLAG_TANZANIA = '\U0001f1f9\U0001f1ff'  # flag: Tanzania
    FLAG_UKRAINE = '\U0001f1fa\U0001f1e6'  # flag: Ukraine
    FLAG_UGANDA = '\U0001f1fa\U0001f1ec'  # flag: Uganda
    FLAG_U_S_OUTLYING_ISLANDS = '\U0001f1fa\U0001f1f2'  # flag: U.S. Outlying Islands
    FLAG_UNITED_NATIONS = '\U0001f1fa\U0001f1f3'  # flag: United Nations
    FLAG_UNITED_STATES = '\U0001f1fa\U0001f1f8'  # flag: United States
    FLAG_URUGUAY = '\U0001f1fa\U0001f1fe'  # flag: Uruguay
    FLAG_UZBEKISTAN = '\U0001f1fa\U0001f1ff'  # flag: Uzbekistan
    FLAG_VATICAN_CITY = '\U0001f1fb\U0001f1e6'  # flag: Vatican City
    FLAG_ST_VINCENT_AND_GRENADINES = '\U0001f1fb\U0001f1e8'  # flag: St. Vincent & Grenadines
    FLAG_VENEZUELA = '\U0001f1fb\U0001f1ea'  # flag: Venezuela
    FLAG_BRITISH_VIRGIN_ISLANDS = '\U0001f1fb\U0001f1ec'  # flag: British Virgin Islands
    FLAG_U_S_VIRGIN_ISLANDS = '\U0001f1fb\U0001f1ee'  # flag: U.S. Virgin Islands
    FLAG_VIETNAM = '\U0001f1fb\U0001f1f3'  # flag: Vietnam
    FLAG_VANUATU = '\U0001f1fb\U0001f1fa'  # flag: Vanuatu
    FLAG_WALLIS_AND_FUTUNA = '\U0001f1fc\U0001f1eb'  # flag: Wallis & Futuna
    FLAG_SAMOA = '\U0001f1fc\U0001f1f8'  # flag: Samoa
    FLAG_KOSOVO = '\U0001f1fd\U0001f1f0'  # flag: Kosovo
    FLAG_YEMEN = '\U0001f1fe\U0001f1ea'  # flag: Yemen
    FLAG_MAYOTTE = '\U0001f1fe\U0001f1f9'  # flag: Mayotte
    FLAG_SOUTH_AFRICA = '\U0001f1ff\U0001f1e6'  # flag: South Africa
    FLAG_ZAMBIA = '\U0001f1ff\U0001f1f2'  # flag: Zambia
    FLAG_ZIMBABWE = '\U0001f1ff\U0001f1fc'  # flag: Zimbabwe
    FLAG_ENGLAND = '\U0001f3f4\U000e0067\U000e0062\U000e0065\U000e006e\U000e0067\U000e007f'  # flag: England
    FLAG_SCOTLAND = '\U0001f3f4\U000e0067\U000e0062\U000e0073\U000e0063\U000e0074\U000e007f'  # flag: Scotland
    FLAG_WALES = '\U0001f3f4\U000e0067\U000e0062\U000e0077\U000e006c\U000e0073\U000e007f'  # flag: Wales


SORT_ORDER: Final[dict[Emoji, int]] = {
    Emoji.GRINNING_FACE: 0,
    Emoji.GRINNING_FACE_WITH_BIG_EYES: 1,
    Emoji.GRINNING_FACE_WITH_SMILING_EYES: 2,
    Emoji.BEAMING_FACE_WITH_SMILING_EYES: 3,
    Emoji.GRINNING_SQUINTING_FACE: 4,
    Emoji.GRINNING_FACE_WITH_SWEAT: 5,
    Emoji.ROLLING_ON_THE_FLOOR_LAUGHING: 6,
    Emoji.FACE_WITH_TEARS_OF_JOY: 7,
    Emoji.SLIGHTLY_SMILING_FACE: 8,
    Emoji.UPSIDE_DOWN_FACE: 9,
    Emoji.MELTING_FACE: 10,
    Emoji.WINKING_FACE: 11,
    Emoji.SMILING_FACE_WITH_SMILING_EYES: 12,
    Emoji.SMILING_FACE_WITH_HALO: 13,
    Emoji.SMILING_FACE_WITH_HEARTS: 14,
    Emoji.SMILING_FACE_WITH_HEART_EYES: 15,
    Emoji.STAR_STRUCK: 16,
    Emoji.FACE_BLOWING_A_KISS: 17,
    Emoji.KISSING_FACE: 18,
    Emoji.SMILING_FACE: 19,
    Emoji.KISSING_FACE_WITH_CLOSED_EYES: 20,
    Emoji.KISSING_FACE_WITH_SMILING_EYES: 21,
    Emoji.SMILING_FACE_WITH_TEAR: 22,
    Emoji.FACE_SAVORING_FOOD: 23,
    Emoji.FACE_WITH_TONGUE: 24,
    Emoji.WINKING_FACE_WITH_TONGUE: 25,
    Emoji.ZANY_FACE: 26,
    Emoji.SQUINTING_FACE_WITH_TONGUE: 27,
    Emoji.MONEY_MOUTH_FACE: 28,
    Emoji.SMILING_FACE_WITH_OPEN_HANDS: 29,
    Emoji.FACE_WITH_HAND_OVER_MOUTH: 30,
    Emoji.FACE_WITH_OPEN_EYES_AND_HAND_OVER_MOUTH: 31,
    Emoji.FACE_WITH_PEEKING_EYE: 32,
    Emoji.SHUSHING_FACE: 33,
    Emoji.THINKING_FACE: 34,
    Emoji.SALUTING_FACE: 35,
    Emoji.ZIPPER_MOUTH_FACE: 36,
    Emoji.FACE_WITH_RAISED_EYEBROW: 37,
    Emoji.NEUTRAL_FACE: 38,
    Emoji.EXPRESSIONLESS_FACE: 39,
    Emoji.FACE_WITHOUT_MOUTH: 40,
    Emoji.DOTTED_LINE_FACE: 41,
    Emoji.FACE_IN_CLOUDS: 42,
    Emoji.SMIRKING_FACE: 43,
    Emoji.UNAMUSED_FACE: 44,
    Emoji.FACE_WITH_ROLLING_EYES: 45,
    Emoji.GRIMACING_FACE: 46,
    Emoji.FACE_EXHALING: 47,
    Emoji.LYING_FACE: 48,
    Emoji.SHAKING_FACE: 49,
    Emoji.HEAD_SHAKING_HORIZONTALLY: 50,
    Emoji.HEAD_SHAKING_VERTICALLY: 51,
    Emoji.RELIEVED_FACE: 52,
    Emoji.PENSIVE_FACE: 53,
    Emoji.SLEEPY_FACE: 54,
    Emoji.DROOLING_FACE: 55,
    Emoji.SLEEPING_FACE: 56,
    Emoji.FACE_WITH_MEDICAL_MASK: 57,
    Emoji.FACE_WITH_THERMOMETER: 58,
    Emoji.FACE_WITH_HEAD_BANDAGE: 59,
    Emoji.NAUSEATED_FACE: 60,
    Emoji.FACE_VOMITING: 61,
    Emoji.SNEEZING_FACE: 62,
    Emoji.HOT_FACE: 63,
    Emoji.COLD_FACE: 64,
    Emoji.WOOZY_FACE: 65,
    Emoji.FACE_WITH_CROSSED_OUT_EYES: 66,
    Emoji.FACE_WITH_SPIRAL_EYES: 67,
    Emoji.EXPLODING_HEAD: 68,
    Emoji.COWBOY_HAT_FACE: 69,
    Emoji.PARTYING_FACE: 70,
    Emoji.DISGUISED_FACE: 71,
    Emoji.SMILING_FACE_WITH_SUNGLASSES: 72,
    Emoji.NERD_FACE: 73,
    Emoji.FACE_WITH_MONOCLE: 74,
    Emoji.CONFUSED_FACE: 75,
    Emoji.FACE_WITH_DIAGONAL_MOUTH: 76,
    Emoji.WORRIED_FACE: 77,
    Emoji.SLIGHTLY_FROWNING_FACE: 78,
    Emoji.FROWNING_FACE: 79,
    Emoji.FACE_WITH_OPEN_MOUTH: 80,
    Emoji.HUSHED_FACE: 81,
    Emoji.ASTONISHED_FACE: 82,
    Emoji.FLUSHED_FACE: 83,
    Emoji.PLEADING_FACE: 84,
    Emoji.FACE_HOLDING_BACK_TEARS: 85,
    Emoji.FROWNING_FACE_WITH_OPEN_MOUTH: 86,
    Emoji.ANGUISHED_FACE: 87,
    Emoji.FEARFUL_FACE: 88,
    Emoji.ANXIOUS_FACE_WITH_SWEAT: 89,
    Emoji.SAD_BUT_RELIEVED_FACE: 90,
    Emoji.CRYING_FACE: 91,
    Emoji.LOUDLY_CRYING_FACE: 92,
    Emoji.FACE_SCREAMING_IN_FEAR: 93,
    Emoji.CONFOUNDED_FACE: 94,
    Emoji.PERSEVERING_FACE: 95,
    Emoji.DISAPPOINTED_FACE: 96,
    Emoji.DOWNCAST_FACE_WITH_SWEAT: 97,
    Emoji.WEARY_FACE: 98,
    Emoji.TIRED_FACE: 99,
    Emoji.YAWNING_FACE: 100,
    Emoji.FACE_WITH_STEAM_FROM_NOSE: 101,
    Emoji.ENRAGED_FACE: 102,
    Emoji.ANGRY_FACE: 103,
    Emoji.FACE_WITH_SYMBOLS_ON_MOUTH: 104,
    Emoji.SMILING_FACE_WITH_HORNS: 105,
    Emoji.ANGRY_FACE_WITH_HORNS: 106,
    Emoji.SKULL: 107,
    Emoji.SKULL_AND_CROSSBONES: 108,
    Emoji.PILE_OF_POO: 109,
    Emoji.CLOWN_FACE: 110,
    Emoji.OGRE: 111,
    Emoji.GOBLIN: 112,
    Emoji.GHOST: 113,
    Emoji.ALIEN: 114,
    Emoji.ALIEN_MONSTER: 115,
    Emoji.ROBOT: 116,
    Emoji.GRINNING_CAT: 117,
    Emoji.GRINNING_CAT_WITH_SMILING_EYES: 118,
    Emoji.CAT_WITH_TEARS_OF_JOY: 119,
    Emoji.SMILING_CAT_WITH_HEART_EYES: 120,
    Emoji.CAT_WITH_WRY_SMILE: 121,
    Emoji.KISSING_CAT: 122,
    Emoji.WEARY_CAT: 123,
    Emoji.CRYING_CAT: 124,
    Emoji.POUTING_CAT: 125,
    Emoji.SEE_NO_EVIL_MONKEY: 126,
    Emoji.HEAR_NO_EVIL_MONKEY: 127,
    Emoji.SPEAK_NO_EVIL_MONKEY: 128,
    Emoji.LOVE_LETTER: 129,
    Emoji.HEART_WITH_ARROW: 130,
    Emoji.HEART_WITH_RIBBON: 131,
    Emoji.SPARKLING_HEART: 132,
    Emoji.GROWING_HEART: 133,
    Emoji.BEATING_HEART: 134,
    Emoji.REVOLVING_HEARTS: 135,
    Emoji.TWO_HEARTS: 136,
    Emoji.HEART_DECORATION: 137,
    Emoji.HEART_EXCLAMATION: 138,
    Emoji.BROKEN_HEART: 139,
    Emoji.HEART_ON_FIRE: 140,
    Emoji.MENDING_HEART: 141,
    Emoji.RED_HEART: 142,
    Emoji.PINK_HEART: 143,
    Emoji.ORANGE_HEART: 144,
    Emoji.YELLOW_HEART: 145,
    Emoji.GREEN_HEART: 146,
    Emoji.BLUE_HEART: 147,
    Emoji.LIGHT_BLUE_HEART: 148,
    Emoji.PURPLE_HEART: 149,
    Emoji.BROWN_HEART: 150,
    Emoji.BLACK_HEART: 151,
    Emoji.GREY_HEART: 152,
    Emoji.WHITE_HEART: 153,
    Emoji.KISS_MARK: 154,
    Emoji.HUNDRED_POINTS: 155,
    Emoji.ANGER_SYMBOL: 156,
    Emoji.COLLISION: 157,
    Emoji.DIZZY: 158,
    Emoji.SWEAT_DROPLETS: 159,
    Emoji.DASHING_AWAY: 160,
    Emoji.HOLE: 161,
    Emoji.SPEECH_BALLOON: 162,
    Emoji.EYE_IN_SPEECH_BUBBLE: 163,
    Emoji.LEFT_SPEECH_BUBBLE: 164,
    Emoji.RIGHT_ANGER_BUBBLE: 165,
    Emoji.THOUGHT_BALLOON: 166,
    Emoji.ZZZ: 167,
    Emoji.WAVING_HAND: 168,
    Emoji.RAISED_BACK_OF_HAND: 169,
    Emoji.HAND_WITH_FINGERS_SPLAYED: 170,
    Emoji.RAISED_HAND: 171,
    Emoji.VULCAN_SALUTE: 172,
    Emoji.RIGHTWARDS_HAND: 173,
    Emoji.LEFTWARDS_HAND: 174,
    Emoji.PALM_DOWN_HAND: 175,
    Emoji.PALM_UP_HAND: 176,
    Emoji.LEFTWARDS_PUSHING_HAND: 177,
    Emoji.RIGHTWARDS_PUSHING_HAND: 178,
    Emoji.OK_HAND: 179,
    Emoji.PINCHED_FINGERS: 180,
    Emoji.PINCHING_HAND: 181,
    Emoji.VICTORY_HAND: 182,
    Emoji.CROSSED_FINGERS: 183,
    Emoji.HAND_WITH_INDEX_FINGER_AND_THUMB_CROSSED: 184,
    Emoji.LOVE_YOU_GESTURE: 185,
    Emoji.SIGN_OF_THE_HORNS: 186,
    Emoji.CALL_ME_HAND: 187,
    Emoji.BACKHAND_INDEX_POINTING_LEFT: 188,
    Emoji.BACKHAND_INDEX_POINTING_RIGHT: 189,
    Emoji.BACKHAND_INDEX_POINTING_UP: 190,
    Emoji.MIDDLE_FINGER: 191,
    Emoji.BACKHAND_INDEX_POINTING_DOWN: 192,
    Emoji.INDEX_POINTING_UP: 193,
    Emoji.INDEX_POINTING_AT_THE_VIEWER: 194,
    Emoji.THUMBS_UP: 195,
    Emoji.THUMBS_DOWN: 196,
    Emoji.RAISED_FIST: 197,
    Emoji.ONCOMING_FIST: 198,
    Emoji.LEFT_FACING_FIST: 199,
    Emoji.RIGHT_FACING_FIST: 200,
    Emoji.CLAPPING_HANDS: 201,
    Emoji.RAISING_HANDS: 202,
    Emoji.HEART_HANDS: 203,
    Emoji.OPEN_HANDS: 204,
    Emoji.PALMS_UP_TOGETHER: 205,
    Emoji.HANDSHAKE: 206,
    Emoji.FOLDED_HANDS: 207,
    Emoji.WRITING_HAND: 208,
    Emoji.NAIL_POLISH: 209,
    Emoji.SELFIE: 210,
    Emoji.FLEXED_BICEPS: 211,
    Emoji.MECHANICAL_ARM: 212,
    Emoji.MECHANICAL_LEG: 213,
    Emoji.LEG: 214,
    Emoji.FOOT: 215,
    Emoji.EAR: 216,
    Emoji.EAR_WITH_HEARING_AID: 217,
    Emoji.NOSE: 218,
    Emoji.BRAIN: 219,
    Emoji.ANATOMICAL_HEART: 220,
    Emoji.LUNGS: 221,
    Emoji.TOOTH: 222,
    Emoji.BONE: 223,
    Emoji.EYES: 224,
    Emoji.EYE: 225,
    Emoji.TONGUE: 226,
    Emoji.MOUTH: 227,
    Emoji.BITING_LIP: 228,
    Emoji.BABY: 229,
    Emoji.CHILD: 230,
    Emoji.BOY: 231,
    Emoji.GIRL: 232,
    Emoji.PERSON: 233,
    Emoji.PERSON_BLOND_HAIR: 234,
    Emoji.MAN: 235,
    Emoji.PERSON_BEARD: 236,
    Emoji.MAN_BEARD: 237,
    Emoji.WOMAN_BEARD: 238,
    Emoji.MAN_RED_HAIR: 239,
    Emoji.MAN_CURLY_HAIR: 240,
    Emoji.MAN_WHITE_HAIR: 241,
    Emoji.MAN_BALD: 242,
    Emoji.WOMAN: 243,
    Emoji.WOMAN_RED_HAIR: 244,
    Emoji.PERSON_RED_HAIR: 245,
    Emoji.WOMAN_CURLY_HAIR: 246,
    Emoji.PERSON_CURLY_HAIR: 247,
    Emoji.WOMAN_WHITE_HAIR: 248,
    Emoji.PERSON_WHITE_HAIR: 249,
    Emoji.WOMAN_BALD: 250,
    Emoji.PERSON_BALD: 251,
    Emoji.WOMAN_BLOND_HAIR: 252,
    Emoji.MAN_BLOND_HAIR: 253,
    Emoji.OLDER_PERSON: 254,
    Emoji.OLD_MAN: 255,
    Emoji.OLD_WOMAN: 256,
    Emoji.PERSON_FROWNING: 257,
    Emoji.MAN_FROWNING: 258,
    Emoji.WOMAN_FROWNING: 259,
    Emoji.PERSON_POUTING: 260,
    Emoji.MAN_POUTING: 261,
    Emoji.WOMAN_POUTING: 262,
    Emoji.PERSON_GESTURING_NO: 263,
    Emoji.MAN_GESTURING_NO: 264,
    Emoji.WOMAN_GESTURING_NO: 265,
    Emoji.PERSON_GESTURING_OK: 266,
    Emoji.MAN_GESTURING_OK: 267,
    Emoji.WOMAN_GESTURING_OK: 268,
    Emoji.PERSON_TIPPING_HAND: 269,
    Emoji.MAN_TIPPING_HAND: 270,
    Emoji.WOMAN_TIPPING_HAND: 271,
    Emoji.PERSON_RAISING_HAND: 272,
    Emoji.MAN_RAISING_HAND: 273,
    Emoji.WOMAN_RAISING_HAND: 274,
    Emoji.DEAF_PERSON: 275,
    Emoji.DEAF_MAN: 276,
    Emoji.DEAF_WOMAN: 277,
    Emoji.PERSON_BOWING: 278,
    Emoji.MAN_BOWING: 279,
    Emoji.WOMAN_BOWING: 280,
    Emoji.PERSON_FACEPALMING: 281,
    Emoji.MAN_FACEPALMING: 282,
    Emoji.WOMAN_FACEPALMING: 283,
    Emoji.PERSON_SHRUGGING: 284,
    Emoji.MAN_SHRUGGING: 285,
    Emoji.WOMAN_SHRUGGING: 286,
    Emoji.HEALTH_WORKER: 287,
    Emoji.MAN_HEALTH_WORKER: 288,
    Emoji.WOMAN_HEALTH_WORKER: 289,
    Emoji.STUDENT: 290,
    Emoji.MAN_STUDENT: 291,
    Emoji.WOMAN_STUDENT: 292,
    Emoji.TEACHER: 293,
    Emoji.MAN_TEACHER: 294,
    Emoji.WOMAN_TEACHER: 295,
    Emoji.JUDGE: 296,
    Emoji.MAN_JUDGE: 297,
    Emoji.WOMAN_JUDGE: 298,
    Emoji.FARMER: 299,
    Emoji.MAN_FARMER: 300,
    Emoji.WOMAN_FARMER: 301,
    Emoji.COOK: 302,
    Emoji.MAN_COOK: 303,
    Emoji.WOMAN_COOK: 304,
    Emoji.MECHANIC: 305,
    Emoji.MAN_MECHANIC: 306,
    Emoji.WOMAN_MECHANIC: 307,
    Emoji.FACTORY_WORKER: 308,
    Emoji.MAN_FACTORY_WORKER: 309,
    Emoji.WOMAN_FACTORY_WORKER: 310,
    Emoji.OFFICE_WORKER: 311,
    Emoji.MAN_OFFICE_WORKER: 312,
    Emoji.WOMAN_OFFICE_WORKER: 313,
    Emoji.SCIENTIST: 314,
    Emoji.MAN_SCIENTIST: 315,
    Emoji.WOMAN_SCIENTIST: 316,
    Emoji.TECHNOLOGIST: 317,
    Emoji.MAN_TECHNOLOGIST: 318,
    Emoji.WOMAN_TECHNOLOGIST: 319,
    Emoji.SINGER: 320,
    Emoji.MAN_SINGER: 321,
    Emoji.WOMAN_SINGER: 322,
    Emoji.ARTIST: 323,
    Emoji.MAN_ARTIST: 324,
    Emoji.WOMAN_ARTIST: 325,
    Emoji.PILOT: 326,
    Emoji.MAN_PILOT: 327,
    Emoji.WOMAN_PILOT: 328,
    Emoji.ASTRONAUT: 329,
    Emoji.MAN_ASTRONAUT: 330,
    Emoji.WOMAN_ASTRONAUT: 331,
    Emoji.FIREFIGHTER: 332,
    Emoji.MAN_FIREFIGHTER: 333,
    Emoji.WOMAN_FIREFIGHTER: 334,
    Emoji.POLICE_OFFICER: 335,
    Emoji.MAN_POLICE_OFFICER: 336,
    Emoji.WOMAN_POLICE_OFFICER: 337,
    Emoji.DETECTIVE: 338,
    Emoji.MAN_DETECTIVE: 339,
    Emoji.WOMAN_DETECTIVE: 340,
    Emoji.GUARD: 341,
    Emoji.MAN_GUARD: 342,
    Emoji.WOMAN_GUARD: 343,
    Emoji.NINJA: 344,
    Emoji.CONSTRUCTION_WORKER: 345,
    Emoji.MAN_CONSTRUCTION_WORKER: 346,
    Emoji.WOMAN_CONSTRUCTION_WORKER: 347,
    Emoji.PERSON_WITH_CROWN: 348,
    Emoji.PRINCE: 349,
    Emoji.PRINCESS: 350,
    Emoji.PERSON_WEARING_TURBAN: 351,
    Emoji.MAN_WEARING_TURBAN: 352,
    Emoji.WOMAN_WEARING_TURBAN: 353,
    Emoji.PERSON_WITH_SKULLCAP: 354,
    Emoji.WOMAN_WITH_HEADSCARF: 355,
    Emoji.PERSON_IN_TUXEDO: 356,
    Emoji.MAN_IN_TUXEDO: 357,
    Emoji.WOMAN_IN_TUXEDO: 358,
    Emoji.PERSON_WITH_VEIL: 359,
    Emoji.MAN_WITH_VEIL: 360,
    Emoji.WOMAN_WITH_VEIL: 361,
    Emoji.PREGNANT_WOMAN: 362,
    Emoji.PREGNANT_MAN: 363,
    Emoji.PREGNANT_PERSON: 364,
    Emoji.BREAST_FEEDING: 365,
    Emoji.WOMAN_FEEDING_BABY: 366,
    Emoji.MAN_FEEDING_BABY: 367,
    Emoji.PERSON_FEEDING_BABY: 368,
    Emoji.BABY_ANGEL: 369,
    Emoji.SANTA_CLAUS: 370,
    Emoji.MRS_CLAUS: 371,
    Emoji.MX_CLAUS: 372,
    Emoji.SUPERHERO: 373,
    Emoji.MAN_SUPERHERO: 374,
    Emoji.WOMAN_SUPERHERO: 375,
    Emoji.SUPERVILLAIN: 376,
    Emoji.MAN_SUPERVILLAIN: 377,
    Emoji.WOMAN_SUPERVILLAIN: 378,
    Emoji.MAGE: 379,
    Emoji.MAN_MAGE: 380,
    Emoji.WOMAN_MAGE: 381,
    Emoji.FAIRY: 382,
    Emoji.MAN_FAIRY: 383,
    Emoji.WOMAN_FAIRY: 384,
    Emoji.VAMPIRE: 385,
    Emoji.MAN_VAMPIRE: 386,
    Emoji.WOMAN_VAMPIRE: 387,
    Emoji.MERPERSON: 388,
    Emoji.MERMAN: 389,
    Emoji.MERMAID: 390,
    Emoji.ELF: 391,
    Emoji.MAN_ELF: 392,
    Emoji.WOMAN_ELF: 393,
    Emoji.GENIE: 394,
    Emoji.MAN_GENIE: 395,
    Emoji.WOMAN_GENIE: 396,
    Emoji.ZOMBIE: 397,
    Emoji.MAN_ZOMBIE: 398,
    Emoji.WOMAN_ZOMBIE: 399,
    Emoji.TROLL: 400,
    Emoji.PERSON_GETTING_MASSAGE: 401,
    Emoji.MAN_GETTING_MASSAGE: 402,
    Emoji.WOMAN_GETTING_MASSAGE: 403,
    Emoji.PERSON_GETTING_HAIRCUT: 404,
    Emoji.MAN_GETTING_HAIRCUT: 405,
    Emoji.WOMAN_GETTING_HAIRCUT: 406,
    Emoji.PERSON_WALKING: 407,
    Emoji.MAN_WALKING: 408,
    Emoji.WOMAN_WALKING: 409,
    Emoji.PERSON_WALKING_FACING_RIGHT: 410,
    Emoji.WOMAN_WALKING_FACING_RIGHT: 411,
    Emoji.MAN_WALKING_FACING_RIGHT: 412,
    Emoji.PERSON_STANDING: 413,
    Emoji.MAN_STANDING: 414,
    Emoji.WOMAN_STANDING: 415,
    Emoji.PERSON_KNEELING: 416,
    Emoji.MAN_KNEELING: 417,
    Emoji.WOMAN_KNEELING: 418,
    Emoji.PERSON_KNEELING_FACING_RIGHT: 419,
    Emoji.WOMAN_KNEELING_FACING_RIGHT: 420,
    Emoji.MAN_KNEELING_FACING_RIGHT: 421,
    Emoji.PERSON_WITH_WHITE_CANE: 422,
    Emoji.PERSON_WITH_WHITE_CANE_FACING_RIGHT: 423,
    Emoji.MAN_WITH_WHITE_CANE: 424,
    Emoji.MAN_WITH_WHITE_CANE_FACING_RIGHT: 425,
    Emoji.WOMAN_WITH_WHITE_CANE: 426,
    Emoji.WOMAN_WITH_WHITE_CANE_FACING_RIGHT: 427,
    Emoji.PERSON_IN_MOTORIZED_WHEELCHAIR: 428,
    Emoji.PERSON_IN_MOTORIZED_WHEELCHAIR_FACING_RIGHT: 429,
    Emoji.MAN_IN_MOTORIZED_WHEELCHAIR: 430,
    Emoji.MAN_IN_MOTORIZED_WHEELCHAIR_FACING_RIGHT: 431,
    Emoji.WOMAN_IN_MOTORIZED_WHEELCHAIR: 432,
    Emoji.WOMAN_IN_MOTORIZED_WHEELCHAIR_FACING_RIGHT: 433,
    Emoji.PERSON_IN_MANUAL_WHEELCHAIR: 434,
    Emoji.PERSON_IN_MANUAL_WHEELCHAIR_FACING_RIGHT: 435,
    Emoji.MAN_IN_MANUAL_WHEELCHAIR: 436,
    Emoji.MAN_IN_MANUAL_WHEELCHAIR_FACING_RIGHT: 437,
    Emoji.WOMAN_IN_MANUAL_WHEELCHAIR: 438,
    Emoji.WOMAN_IN_MANUAL_WHEELCHAIR_FACING_RIGHT: 439,
    Emoji.PERSON_RUNNING: 440,
    Emoji.MAN_RUNNING: 441,
    Emoji.WOMAN_RUNNING: 442,
    Emoji.PERSON_RUNNING_FACING_RIGHT: 443,
    Emoji.WOMAN_RUNNING_FACING_RIGHT: 444,
    Emoji.MAN_RUNNING_FACING_RIGHT: 445,
    Emoji.WOMAN_DANCING: 446,
    Emoji.MAN_DANCING: 447,
    Emoji.PERSON_IN_SUIT_LEVITATING: 448,
    Emoji.PEOPLE_WITH_BUNNY_EARS: 449,
    Emoji.MEN_WITH_BUNNY_EARS: 450,
    Emoji.WOMEN_WITH_BUNNY_EARS: 451,
    Emoji.PERSON_IN_STEAMY_ROOM: 452,
    Emoji.MAN_IN_STEAMY_ROOM: 453,
    Emoji.WOMAN_IN_STEAMY_ROOM: 454,
    Emoji.PERSON_CLIMBING: 455,
    Emoji.MAN_CLIMBING: 456,
    Emoji.WOMAN_CLIMBING: 457,
    Emoji.PERSON_FENCING: 458,
    Emoji.HORSE_RACING: 459,
    Emoji.SKIER: 460,
    Emoji.SNOWBOARDER: 461,
    Emoji.PERSON_GOLFING: 462,
    Emoji.MAN_GOLFING: 463,
    Emoji.WOMAN_GOLFING: 464,
    Emoji.PERSON_SURFING: 465,
    Emoji.MAN_SURFING: 466,
    Emoji.WOMAN_SURFING: 467,
    Emoji.PERSON_ROWING_BOAT: 468,
    Emoji.MAN_ROWING_BOAT: 469,
    Emoji.WOMAN_ROWING_BOAT: 470,
    Emoji.PERSON_SWIMMING: 471,
    Emoji.MAN_SWIMMING: 472,
    Emoji.WOMAN_SWIMMING: 473,
    Emoji.PERSON_BOUNCING_BALL: 474,
    Emoji.MAN_BOUNCING_BALL: 475,
    Emoji.WOMAN_BOUNCING_BALL: 476,
    Emoji.PERSON_LIFTING_WEIGHTS: 477,
    Emoji.MAN_LIFTING_WEIGHTS: 478,
    Emoji.WOMAN_LIFTING_WEIGHTS: 479,
    Emoji.PERSON_BIKING: 480,
    Emoji.MAN_BIKING: 481,
    Emoji.WOMAN_BIKING: 482,
    Emoji.PERSON_MOUNTAIN_BIKING: 483,
    Emoji.MAN_MOUNTAIN_BIKING: 484,
    Emoji.WOMAN_MOUNTAIN_BIKING: 485,
    Emoji.PERSON_CARTWHEELING: 486,
    Emoji.MAN_CARTWHEELING: 487,
    Emoji.WOMAN_CARTWHEELING: 488,
    Emoji.PEOPLE_WRESTLING: 489,
    Emoji.MEN_WRESTLING: 490,
    Emoji.WOMEN_WRESTLING: 491,
    Emoji.PERSON_PLAYING_WATER_POLO: 492,
    Emoji.MAN_PLAYING_WATER_POLO: 493,
    Emoji.WOMAN_PLAYING_WATER_POLO: 494,
    Emoji.PERSON_PLAYING_HANDBALL: 495,
    Emoji.MAN_PLAYING_HANDBALL: 496,
    Emoji.WOMAN_PLAYING_HANDBALL: 497,
    Emoji.PERSON_JUGGLING: 498,
    Emoji.MAN_JUGGLING: 499,
    Emoji.WOMAN_JUGGLING: 500,
    Emoji.PERSON_IN_LOTUS_POSITION: 501,
    Emoji.MAN_IN_LOTUS_POSITION: 502,
    Emoji.WOMAN_IN_LOTUS_POSITION: 503,
    Emoji.PERSON_TAKING_BATH: 504,
    Emoji.PERSON_IN_BED: 505,
    Emoji.PEOPLE_HOLDING_HANDS: 506,
    Emoji.WOMEN_HOLDING_HANDS: 507,
    Emoji.WOMAN_AND_MAN_HOLDING_HANDS: 508,
    Emoji.MEN_HOLDING_HANDS: 509,
    Emoji.KISS: 510,
    Emoji.KISS_WOMAN_MAN: 511,
    Emoji.KISS_MAN_MAN: 512,
    Emoji.KISS_WOMAN_WOMAN: 513,
    Emoji.COUPLE_WITH_HEART: 514,
    Emoji.COUPLE_WITH_HEART_WOMAN_MAN: 515,
    Emoji.COUPLE_WITH_HEART_MAN_MAN: 516,
    Emoji.COUPLE_WITH_HEART_WOMAN_WOMAN: 517,
    Emoji.FAMILY_MAN_WOMAN_BOY: 518,
    Emoji.FAMILY_MAN_WOMAN_GIRL: 519,
    Emoji.FAMILY_MAN_WOMAN_GIRL_BOY: 520,
    Emoji.FAMILY_MAN_WOMAN_BOY_BOY: 521,
    Emoji.FAMILY_MAN_WOMAN_GIRL_GIRL: 522,
    Emoji.FAMILY_MAN_MAN_BOY: 523,
    Emoji.FAMILY_MAN_MAN_GIRL: 524,
    Emoji.FAMILY_MAN_MAN_GIRL_BOY: 525,
    Emoji.FAMILY_MAN_MAN_BOY_BOY: 526,
    Emoji.FAMILY_MAN_MAN_GIRL_GIRL: 527,
    Emoji.FAMILY_WOMAN_WOMAN_BOY: 528,
    Emoji.FAMILY_WOMAN_WOMAN_GIRL: 529,
    Emoji.FAMILY_WOMAN_WOMAN_GIRL_BOY: 530,
    Emoji.FAMILY_WOMAN_WOMAN_BOY_BOY: 531,
    Emoji.FAMILY_WOMAN_WOMAN_GIRL_GIRL: 532,
    Emoji.FAMILY_MAN_BOY: 533,
    Emoji.FAMILY_MAN_BOY_BOY: 534,
    Emoji.FAMILY_MAN_GIRL: 535,
    Emoji.FAMILY_MAN_GIRL_BOY: 536,
    Emoji.FAMILY_MAN_GIRL_GIRL: 537,
    Emoji.FAMILY_WOMAN_BOY: 538,
    Emoji.FAMILY_WOMAN_BOY_BOY: 539,
    Emoji.FAMILY_WOMAN_GIRL: 540,
    Emoji.FAMILY_WOMAN_GIRL_BOY: 541,
    Emoji.FAMILY_WOMAN_GIRL_GIRL: 542,
    Emoji.SPEAKING_HEAD: 543,
    Emoji.BUST_IN_SILHOUETTE: 544,
    Emoji.BUSTS_IN_SILHOUETTE: 545,
    Emoji.PEOPLE_HUGGING: 546,
    Emoji.FAMILY: 547,
    Emoji.FAMILY_ADULT_ADULT_CHILD: 548,
    Emoji.FAMILY_ADULT_ADULT_CHILD_CHILD: 549,
    Emoji.FAMILY_ADULT_CHILD: 550,
    Emoji.FAMILY_ADULT_CHILD_CHILD: 551,
    Emoji.FOOTPRINTS: 552,
    Emoji.MONKEY_FACE: 553,
    Emoji.MONKEY: 554,
    Emoji.GORILLA: 555,
    Emoji.ORANGUTAN: 556,
    Emoji.DOG_FACE: 557,
    Emoji.DOG: 558,
    Emoji.GUIDE_DOG: 559,
    Emoji.SERVICE_DOG: 560,
    Emoji.POODLE: 561,
    Emoji.WOLF: 562,
    Emoji.FOX: 563,
    Emoji.RACCOON: 564,
    Emoji.CAT_FACE: 565,
    Emoji.CAT: 566,
    Emoji.BLACK_CAT: 567,
    Emoji.LION: 568,
    Emoji.TIGER_FACE: 569,
    Emoji.TIGER: 570,
    Emoji.LEOPARD: 571,
    Emoji.HORSE_FACE: 572,
    Emoji.MOOSE: 573,
    Emoji.DONKEY: 574,
    Emoji.HORSE: 575,
    Emoji.UNICORN: 576,
    Emoji.ZEBRA: 577,
    Emoji.DEER: 578,
    Emoji.BISON: 579,
    Emoji.COW_FACE: 580,
    Emoji.OX: 581,
    Emoji.WATER_BUFFALO: 582,
    Emoji.COW: 583,
    Emoji.PIG_FACE: 584,
    Emoji.PIG: 585,
    Emoji.BOAR: 586,
    Emoji.PIG_NOSE: 587,
    Emoji.RAM: 588,
    Emoji.EWE: 589,
    Emoji.GOAT: 590,
    Emoji.CAMEL: 591,
    Emoji.TWO_HUMP_CAMEL: 592,
    Emoji.LLAMA: 593,
    Emoji.GIRAFFE: 594,
    Emoji.ELEPHANT: 595,
    Emoji.MAMMOTH: 596,
    Emoji.RHINOCEROS: 597,
    Emoji.HIPPOPOTAMUS: 598,
    Emoji.MOUSE_FACE: 599,
    Emoji.MOUSE: 600,
    Emoji.RAT: 601,
    Emoji.HAMSTER: 602,
    Emoji.RABBIT_FACE: 603,
    Emoji.RABBIT: 604,
    Emoji.CHIPMUNK: 605,
    Emoji.BEAVER: 606,
    Emoji.HEDGEHOG: 607,
    Emoji.BAT: 608,
    Emoji.BEAR: 609,
    Emoji.POLAR_BEAR: 610,
    Emoji.KOALA: 611,
    Emoji.PANDA: 612,
    Emoji.SLOTH: 613,
    Emoji.OTTER: 614,
    Emoji.SKUNK: 615,
    Emoji.KANGAROO: 616,
    Emoji.BADGER: 617,
    Emoji.PAW_PRINTS: 618,
    Emoji.TURKEY: 619,
    Emoji.CHICKEN: 620,
    Emoji.ROOSTER: 621,
    Emoji.HATCHING_CHICK: 622,
    Emoji.BABY_CHICK: 623,
    Emoji.FRONT_FACING_BABY_CHICK: 624,
    Emoji.BIRD: 625,
    Emoji.PENGUIN: 626,
    Emoji.DOVE: 627,
    Emoji.EAGLE: 628,
    Emoji.DUCK: 629,
    Emoji.SWAN: 630,
    Emoji.OWL: 631,
    Emoji.DODO: 632,
    Emoji.FEATHER: 633,
    Emoji.FLAMINGO: 634,
    Emoji.PEACOCK: 635,
    Emoji.PARROT: 636,
    Emoji.WING: 637,
    Emoji.BLACK_BIRD: 638,
    Emoji.GOOSE: 639,
    Emoji.PHOENIX: 640,
    Emoji.FROG: 641,
    Emoji.CROCODILE: 642,
    Emoji.TURTLE: 643,
    Emoji.LIZARD: 644,
    Emoji.SNAKE: 645,
    Emoji.DRAGON_FACE: 646,
    Emoji.DRAGON: 647,
    Emoji.SAUROPOD: 648,
    Emoji.T_REX: 649,
    Emoji.SPOUTING_WHALE: 650,
    Emoji.WHALE: 651,
    Emoji.DOLPHIN: 652,
    Emoji.SEAL: 653,
    Emoji.FISH: 654,
    Emoji.TROPICAL_FISH: 655,
    Emoji.BLOWFISH: 656,
    Emoji.SHARK: 657,
    Emoji.OCTOPUS: 658,
    Emoji.SPIRAL_SHELL: 659,
    Emoji.CORAL: 660,
    Emoji.JELLYFISH: 661,
    Emoji.SNAIL: 662,
    Emoji.BUTTERFLY: 663,
    Emoji.BUG: 664,
    Emoji.ANT: 665,
    Emoji.HONEYBEE: 666,
    Emoji.BEETLE: 667,
    Emoji.LADY_BEETLE: 668,
    Emoji.CRICKET: 669,
    Emoji.COCKROACH: 670,
    Emoji.SPIDER: 671,
    Emoji.SPIDER_WEB: 672,
    Emoji.SCORPION: 673,
    Emoji.MOSQUITO: 674,
    Emoji.FLY: 675,
    Emoji.WORM: 676,
    Emoji.MICROBE: 677,
    Emoji.BOUQUET: 678,
    Emoji.CHERRY_BLOSSOM: 679,
    Emoji.WHITE_FLOWER: 680,
    Emoji.LOTUS: 681,
    Emoji.ROSETTE: 682,
    Emoji.ROSE: 683,
    Emoji.WILTED_FLOWER: 684,
    Emoji.HIBISCUS: 685,
    Emoji.SUNFLOWER: 686,
    Emoji.BLOSSOM: 687,
    Emoji.TULIP: 688,
    Emoji.HYACINTH: 689,
    Emoji.SEEDLING: 690,
    Emoji.POTTED_PLANT: 691,
    Emoji.EVERGREEN_TREE: 692,
    Emoji.DECIDUOUS_TREE: 693,
    Emoji.PALM_TREE: 694,
    Emoji.CACTUS: 695,
    Emoji.SHEAF_OF_RICE: 696,
    Emoji.HERB: 697,
    Emoji.SHAMROCK: 698,
    Emoji.FOUR_LEAF_CLOVER: 699,
    Emoji.MAPLE_LEAF: 700,
    Emoji.FALLEN_LEAF: 701,
    Emoji.LEAF_FLUTTERING_IN_WIND: 702,
    Emoji.EMPTY_NEST: 703,
    Emoji.NEST_WITH_EGGS: 704,
    Emoji.MUSHROOM: 705,
    Emoji.GRAPES: 706,
    Emoji.MELON: 707,
    Emoji.WATERMELON: 708,
    Emoji.TANGERINE: 709,
    Emoji.LEMON: 710,
    Emoji.LIME: 711,
    Emoji.BANANA: 712,
    Emoji.PINEAPPLE: 713,
    Emoji.MANGO: 714,
    Emoji.RED_APPLE: 715,
    Emoji.GREEN_APPLE: 716,
    Emoji.PEAR: 717,
    Emoji.PEACH: 718,
    Emoji.CHERRIES: 719,
    Emoji.STRAWBERRY: 720,
    Emoji.BLUEBERRIES: 721,
    Emoji.KIWI_FRUIT: 722,
    Emoji.TOMATO: 723,
    Emoji.OLIVE: 724,
    Emoji.COCONUT: 725,
    Emoji.AVOCADO: 726,
    Emoji.EGGPLANT: 727,
    Emoji.POTATO: 728,
    Emoji.CARROT: 729,
    Emoji.EAR_OF_CORN: 730,
    Emoji.HOT_PEPPER: 731,
    Emoji.BELL_PEPPER: 732,
    Emoji.CUCUMBER: 733,
    Emoji.LEAFY_GREEN: 734,
    Emoji.BROCCOLI: 735,
    Emoji.GARLIC: 736,
    Emoji.ONION: 737,
    Emoji.PEANUTS: 738,
    Emoji.BEANS: 739,
    Emoji.CHESTNUT: 740,
    Emoji.GINGER_ROOT: 741,
    Emoji.PEA_POD: 742,
    Emoji.BROWN_MUSHROOM: 743,
    Emoji.BREAD: 744,
    Emoji.CROISSANT: 745,
    Emoji.BAGUETTE_BREAD: 746,
    Emoji.FLATBREAD: 747,
    Emoji.PRETZEL: 748,
    Emoji.BAGEL: 749,
    Emoji.PANCAKES: 750,
    Emoji.WAFFLE: 751,
    Emoji.CHEESE_WEDGE: 752,
    Emoji.MEAT_ON_BONE: 753,
    Emoji.POULTRY_LEG: 754,
    Emoji.CUT_OF_MEAT: 755,
    Emoji.BACON: 756,
    Emoji.HAMBURGER: 757,
    Emoji.FRENCH_FRIES: 758,
    Emoji.PIZZA: 759,
    Emoji.HOT_DOG: 760,
    Emoji.SANDWICH: 761,
    Emoji.TACO: 762,
    Emoji.BURRITO: 763,
    Emoji.TAMALE: 764,
    Emoji.STUFFED_FLATBREAD: 765,
    Emoji.FALAFEL: 766,
    Emoji.EGG: 767,
    Emoji.COOKING: 768,
    Emoji.SHALLOW_PAN_OF_FOOD: 769,
    Emoji.POT_OF_FOOD: 770,
    Emoji.FONDUE: 771,
    Emoji.BOWL_WITH_SPOON: 772,
    Emoji.GREEN_SALAD: 773,
    Emoji.POPCORN: 774,
    Emoji.BUTTER: 775,
    Emoji.SALT: 776,
    Emoji.CANNED_FOOD: 777,
    Emoji.BENTO_BOX: 778,
    Emoji.RICE_CRACKER: 779,
    Emoji.RICE_BALL: 780,
    Emoji.COOKED_RICE: 781,
    Emoji.CURRY_RICE: 782,
    Emoji.STEAMING_BOWL: 783,
    Emoji.SPAGHETTI: 784,
    Emoji.ROASTED_SWEET_POTATO: 785,
    Emoji.ODEN: 786,
    Emoji.SUSHI: 787,
    Emoji.FRIED_SHRIMP: 788,
    Emoji.FISH_CAKE_WITH_SWIRL: 789,
    Emoji.MOON_CAKE: 790,
    Emoji.DANGO: 791,
    Emoji.DUMPLING: 792,
    Emoji.FORTUNE_COOKIE: 793,
    Emoji.TAKEOUT_BOX: 794,
    Emoji.CRAB: 795,
    Emoji.LOBSTER: 796,
    Emoji.SHRIMP: 797,
    Emoji.SQUID: 798,
    Emoji.OYSTER: 799,
    Emoji.SOFT_ICE_CREAM: 800,
    Emoji.SHAVED_ICE: 801,
    Emoji.ICE_CREAM: 802,
    Emoji.DOUGHNUT: 803,
    Emoji.COOKIE: 804,
    Emoji.BIRTHDAY_CAKE: 805,
    Emoji.SHORTCAKE: 806,
    Emoji.CUPCAKE: 807,
    Emoji.PIE: 808,
    Emoji.CHOCOLATE_BAR: 809,
    Emoji.CANDY: 810,
    Emoji.LOLLIPOP: 811,
    Emoji.CUSTARD: 812,
    Emoji.HONEY_POT: 813,
    Emoji.BABY_BOTTLE: 814,
    Emoji.GLASS_OF_MILK: 815,
    Emoji.HOT_BEVERAGE: 816,
    Emoji.TEAPOT: 817,
    Emoji.TEACUP_WITHOUT_HANDLE: 818,
    Emoji.SAKE: 819,
    Emoji.BOTTLE_WITH_POPPING_CORK: 820,
    Emoji.WINE_GLASS: 821,
    Emoji.COCKTAIL_GLASS: 822,
    Emoji.TROPICAL_DRINK: 823,
    Emoji.BEER_MUG: 824,
    Emoji.CLINKING_BEER_MUGS: 825,
    Emoji.CLINKING_GLASSES: 826,
    Emoji.TUMBLER_GLASS: 827,
    Emoji.POURING_LIQUID: 828,
    Emoji.CUP_WITH_STRAW: 829,
    Emoji.BUBBLE_TEA: 830,
    Emoji.BEVERAGE_BOX: 831,
    Emoji.MATE: 832,
    Emoji.ICE: 833,
    Emoji.CHOPSTICKS: 834,
    Emoji.FORK_AND_KNIFE_WITH_PLATE: 835,
    Emoji.FORK_AND_KNIFE: 836,
    Emoji.SPOON: 837,
    Emoji.KITCHEN_KNIFE: 838,
    Emoji.JAR: 839,
    Emoji.AMPHORA: 840,
    Emoji.GLOBE_SHOWING_EUROPE_AFRICA: 841,
    Emoji.GLOBE_SHOWING_AMERICAS: 842,
    Emoji.GLOBE_SHOWING_ASIA_AUSTRALIA: 843,
    Emoji.GLOBE_WITH_MERIDIANS: 844,
    Emoji.WORLD_MAP: 845,
    Emoji.MAP_OF_JAPAN: 846,
    Emoji.COMPASS: 847,
    Emoji.SNOW_CAPPED_MOUNTAIN: 848,
    Emoji.MOUNTAIN: 849,
    Emoji.VOLCANO: 850,
    Emoji.MOUNT_FUJI: 851,
    Emoji.CAMPING: 852,
    Emoji.BEACH_WITH_UMBRELLA: 853,
    Emoji.DESERT: 854,
    Emoji.DESERT_ISLAND: 855,
    Emoji.NATIONAL_PARK: 856,
    Emoji.STADIUM: 857,
    Emoji.CLASSICAL_BUILDING: 858,
    Emoji.BUILDING_CONSTRUCTION: 859,
    Emoji.BRICK: 860,
    Emoji.ROCK: 861,
    Emoji.WOOD: 862,
    Emoji.HUT: 863,
    Emoji.HOUSES: 864,
    Emoji.DERELICT_HOUSE: 865,
    Emoji.HOUSE: 866,
    Emoji.HOUSE_WITH_GARDEN: 867,
    Emoji.OFFICE_BUILDING: 868,
    Emoji.JAPANESE_POST_OFFICE: 869,
    Emoji.POST_OFFICE: 870,
    Emoji.HOSPITAL: 871,
    Emoji.BANK: 872,
    Emoji.HOTEL: 873,
    Emoji.LOVE_HOTEL: 874,
    Emoji.CONVENIENCE_STORE: 875,
    Emoji.SCHOOL: 876,
    Emoji.DEPARTMENT_STORE: 877,
    Emoji.FACTORY: 878,
    Emoji.JAPANESE_CASTLE: 879,
    Emoji.CASTLE: 880,
    Emoji.WEDDING: 881,
    Emoji.TOKYO_TOWER: 882,
    Emoji.STATUE_OF_LIBERTY: 883,
    Emoji.CHURCH: 884,
    Emoji.MOSQUE: 885,
    Emoji.HINDU_TEMPLE: 886,
    Emoji.SYNAGOGUE: 887,
    Emoji.SHINTO_SHRINE: 888,
    Emoji.KAABA: 889,
    Emoji.FOUNTAIN: 890,
    Emoji.TENT: 891,
    Emoji.FOGGY: 892,
    Emoji.NIGHT_WITH_STARS: 893,
    Emoji.CITYSCAPE: 894,
    Emoji.SUNRISE_OVER_MOUNTAINS: 895,
    Emoji.SUNRISE: 896,
    Emoji.CITYSCAPE_AT_DUSK: 897,
    Emoji.SUNSET: 898,
    Emoji.BRIDGE_AT_NIGHT: 899,
    Emoji.HOT_SPRINGS: 900,
    Emoji.CAROUSEL_HORSE: 901,
    Emoji.PLAYGROUND_SLIDE: 902,
    Emoji.FERRIS_WHEEL: 903,
    Emoji.ROLLER_COASTER: 904,
    Emoji.BARBER_POLE: 905,
    Emoji.CIRCUS_TENT: 906,
    Emoji.LOCOMOTIVE: 907,
    Emoji.RAILWAY_CAR: 908,
    Emoji.HIGH_SPEED_TRAIN: 909,
    Emoji.BULLET_TRAIN: 910,
    Emoji.TRAIN: 911,
    Emoji.METRO: 912,
    Emoji.LIGHT_RAIL: 913,
    Emoji.STATION: 914,
    Emoji.TRAM: 915,
    Emoji.MONORAIL: 916,
    Emoji.MOUNTAIN_RAILWAY: 917,
    Emoji.TRAM_CAR: 918,
    Emoji.BUS: 919,
    Emoji.ONCOMING_BUS: 920,
    Emoji.TROLLEYBUS: 921,
    Emoji.MINIBUS: 922,
    Emoji.AMBULANCE: 923,
    Emoji.FIRE_ENGINE: 924,
    Emoji.POLICE_CAR: 925,
    Emoji.ONCOMING_POLICE_CAR: 926,
    Emoji.TAXI: 927,
    Emoji.ONCOMING_TAXI: 928,
    Emoji.AUTOMOBILE: 929,
    Emoji.ONCOMING_AUTOMOBILE: 930,
    Emoji.SPORT_UTILITY_VEHICLE: 931,
    Emoji.PICKUP_TRUCK: 932,
    Emoji.DELIVERY_TRUCK: 933,
    Emoji.ARTICULATED_LORRY: 934,
    Emoji.TRACTOR: 935,
    Emoji.RACING_CAR: 936,
    Emoji.MOTORCYCLE: 937,
    Emoji.MOTOR_SCOOTER: 938,
    Emoji.MANUAL_WHEELCHAIR: 939,
    Emoji.MOTORIZED_WHEELCHAIR: 940,
    Emoji.AUTO_RICKSHAW: 941,
    Emoji.BICYCLE: 942,
    Emoji.KICK_SCOOTER: 943,
    Emoji.SKATEBOARD: 944,
    Emoji.ROLLER_SKATE: 945,
    Emoji.BUS_STOP: 946,
    Emoji.MOTORWAY: 947,
    Emoji.RAILWAY_TRACK: 948,
    Emoji.OIL_DRUM: 949,
    Emoji.FUEL_PUMP: 950,
    Emoji.WHEEL: 951,
    Emoji.POLICE_CAR_LIGHT: 952,
    Emoji.HORIZONTAL_TRAFFIC_LIGHT: 953,
    Emoji.VERTICAL_TRAFFIC_LIGHT: 954,
    Emoji.STOP_SIGN: 955,
    Emoji.CONSTRUCTION: 956,
    Emoji.ANCHOR: 957,
    Emoji.RING_BUOY: 958,
    Emoji.SAILBOAT: 959,
    Emoji.CANOE: 960,
    Emoji.SPEEDBOAT: 961,
    Emoji.PASSENGER_SHIP: 962,
    Emoji.FERRY: 963,
    Emoji.MOTOR_BOAT: 964,
    Emoji.SHIP: 965,
    Emoji.AIRPLANE: 966,
    Emoji.SMALL_AIRPLANE: 967,
    Emoji.AIRPLANE_DEPARTURE: 968,
    Emoji.AIRPLANE_ARRIVAL: 969,
    Emoji.PARACHUTE: 970,
    Emoji.SEAT: 971,
    Emoji.HELICOPTER: 972,
    Emoji.SUSPENSION_RAILWAY: 973,
    Emoji.MOUNTAIN_CABLEWAY: 974,
    Emoji.AERIAL_TRAMWAY: 975,
    Emoji.SATELLITE: 976,
    Emoji.ROCKET: 977,
    Emoji.FLYING_SAUCER: 978,
    Emoji.BELLHOP_BELL: 979,
    Emoji.LUGGAGE: 980,
    Emoji.HOURGLASS_DONE: 981,
    Emoji.HOURGLASS_NOT_DONE: 982,
    Emoji.WATCH: 983,
    Emoji.ALARM_CLOCK: 984,
    Emoji.STOPWATCH: 985,
    Emoji.TIMER_CLOCK: 986,
    Emoji.MANTELPIECE_CLOCK: 987,
    Emoji.TWELVE_OCLOCK: 988,
    Emoji.TWELVE_THIRTY: 989,
    Emoji.ONE_OCLOCK: 990,
    Emoji.ONE_THIRTY: 991,
    Emoji.TWO_OCLOCK: 992,
    Emoji.TWO_THIRTY: 993,
    Emoji.THREE_OCLOCK: 994,
    Emoji.THREE_THIRTY: 995,
    Emoji.FOUR_OCLOCK: 996,
    Emoji.FOUR_THIRTY: 997,
    Emoji.FIVE_OCLOCK: 998,
    Emoji.FIVE_THIRTY: 999,
    Emoji.SIX_OCLOCK: 1000,
    Emoji.SIX_THIRTY: 1001,
    Emoji.SEVEN_OCLOCK: 1002,
    Emoji.SEVEN_THIRTY: 1003,
    Emoji.EIGHT_OCLOCK: 1004,
    Emoji.EIGHT_THIRTY: 1005,
    Emoji.NINE_OCLOCK: 1006,
    Emoji.NINE_THIRTY: 1007,
    Emoji.TEN_OCLOCK: 1008,
    Emoji.TEN_THIRTY: 1009,
    Emoji.ELEVEN_OCLOCK: 1010,
    Emoji.ELEVEN_THIRTY: 1011,
    Emoji.NEW_MOON: 1012,
    Emoji.WAXING_CRESCENT_MOON: 1013,
    Emoji.FIRST_QUARTER_MOON: 1014,
    Emoji.WAXING_GIBBOUS_MOON: 1015,
    Emoji.FULL_MOON: 1016,
    Emoji.WANING_GIBBOUS_MOON: 1017,
    Emoji.LAST_QUARTER_MOON: 1018,
    Emoji.WANING_CRESCENT_MOON: 1019,
    Emoji.CRESCENT_MOON: 1020,
    Emoji.NEW_MOON_FACE: 1021,
    Emoji.FIRST_QUARTER_MOON_FACE: 1022,
    Emoji.LAST_QUARTER_MOON_FACE: 1023,
    Emoji.THERMOMETER: 1024,
    Emoji.SUN: 1025,
    Emoji.FULL_MOON_FACE: 1026,
    Emoji.SUN_WITH_FACE: 1027,
    Emoji.RINGED_PLANET: 1028,
    Emoji.STAR: 1029,
    Emoji.GLOWING_STAR: 1030,
    Emoji.SHOOTING_STAR: 1031,
    Emoji.MILKY_WAY: 1032,
    Emoji.CLOUD: 1033,
    Emoji.SUN_BEHIND_CLOUD: 1034,
    Emoji.CLOUD_WITH_LIGHTNING_AND_RAIN: 1035,
    Emoji.SUN_BEHIND_SMALL_CLOUD: 1036,
    Emoji.SUN_BEHIND_LARGE_CLOUD: 1037,
    Emoji.SUN_BEHIND_RAIN_CLOUD: 1038,
    Emoji.CLOUD_WITH_RAIN: 1039,
    Emoji.CLOUD_WITH_SNOW: 1040,
    Emoji.CLOUD_WITH_LIGHTNING: 1041,
    Emoji.TORNADO: 1042,
    Emoji.FOG: 1043,
    Emoji.WIND_FACE: 1044,
    Emoji.CYCLONE: 1045,
    Emoji.RAINBOW: 1046,
    Emoji.CLOSED_UMBRELLA: 1047,
    Emoji.UMBRELLA: 1048,
    Emoji.UMBRELLA_WITH_RAIN_DROPS: 1049,
    Emoji.UMBRELLA_ON_GROUND: 1050,
    Emoji.HIGH_VOLTAGE: 1051,
    Emoji.SNOWFLAKE: 1052,
    Emoji.SNOWMAN: 1053,
    Emoji.SNOWMAN_WITHOUT_SNOW: 1054,
    Emoji.COMET: 1055,
    Emoji.FIRE: 1056,
    Emoji.DROPLET: 1057,
    Emoji.WATER_WAVE: 1058,
    Emoji.JACK_O_LANTERN: 1059,
    Emoji.CHRISTMAS_TREE: 1060,
    Emoji.FIREWORKS: 1061,
    Emoji.SPARKLER: 1062,
    Emoji.FIRECRACKER: 1063,
    Emoji.SPARKLES: 1064,
    Emoji.BALLOON: 1065,
    Emoji.PARTY_POPPER: 1066,
    Emoji.CONFETTI_BALL: 1067,
    Emoji.TANABATA_TREE: 1068,
    Emoji.PINE_DECORATION: 1069,
    Emoji.JAPANESE_DOLLS: 1070,
    Emoji.CARP_STREAMER: 1071,
    Emoji.WIND_CHIME: 1072,
    Emoji.MOON_VIEWING_CEREMONY: 1073,
    Emoji.RED_ENVELOPE: 1074,
    Emoji.RIBBON: 1075,
    Emoji.WRAPPED_GIFT: 1076,
    Emoji.REMINDER_RIBBON: 1077,
    Emoji.ADMISSION_TICKETS: 1078,
    Emoji.TICKET: 1079,
    Emoji.MILITARY_MEDAL: 1080,
    Emoji.TROPHY: 1081,
    Emoji.SPORTS_MEDAL: 1082,
    Emoji.FIRST_PLACE_MEDAL: 1083,
    Emoji.SECOND_PLACE_MEDAL: 1084,
    Emoji.THIRD_PLACE_MEDAL: 1085,
    Emoji.SOCCER_BALL: 1086,
    Emoji.BASEBALL: 1087,
    Emoji.SOFTBALL: 1088,
    Emoji.BASKETBALL: 1089,
    Emoji.VOLLEYBALL: 1090,
    Emoji.AMERICAN_FOOTBALL: 1091,
    Emoji.RUGBY_FOOTBALL: 1092,
    Emoji.TENNIS: 1093,
    Emoji.FLYING_DISC: 1094,
    Emoji.BOWLING: 1095,
    Emoji.CRICKET_GAME: 1096,
    Emoji.FIELD_HOCKEY: 1097,
    Emoji.ICE_HOCKEY: 1098,
    Emoji.LACROSSE: 1099,
    Emoji.PING_PONG: 1100,
    Emoji.BADMINTON: 1101,
    Emoji.BOXING_GLOVE: 1102,
    Emoji.MARTIAL_ARTS_UNIFORM: 1103,
    Emoji.GOAL_NET: 1104,
    Emoji.FLAG_IN_HOLE: 1105,
    Emoji.ICE_SKATE: 1106,
    Emoji.FISHING_POLE: 1107,
    Emoji.DIVING_MASK: 1108,
    Emoji.RUNNING_SHIRT: 1109,
    Emoji.SKIS: 1110,
    Emoji.SLED: 1111,
    Emoji.CURLING_STONE: 1112,
    Emoji.BULLSEYE: 1113,
    Emoji.YO_YO: 1114,
    Emoji.KITE: 1115,
    Emoji.WATER_PISTOL: 1116,
    Emoji.POOL_8_BALL: 1117,
    Emoji.CRYSTAL_BALL: 1118,
    Emoji.MAGIC_WAND: 1119,
    Emoji.VIDEO_GAME: 1120,
    Emoji.JOYSTICK: 1121,
    Emoji.SLOT_MACHINE: 1122,
    Emoji.GAME_DIE: 1123,
    Emoji.PUZZLE_PIECE: 1124,
    Emoji.TEDDY_BEAR: 1125,
    Emoji.PINATA: 1126,
    Emoji.MIRROR_BALL: 1127,
    Emoji.NESTING_DOLLS: 1128,
    Emoji.SPADE_SUIT: 1129,
    Emoji.HEART_SUIT: 1130,
    Emoji.DIAMOND_SUIT: 1131,
    Emoji.CLUB_SUIT: 1132,
    Emoji.CHESS_PAWN: 1133,
    Emoji.JOKER: 1134,
    Emoji.MAHJONG_RED_DRAGON: 1135,
    Emoji.FLOWER_PLAYING_CARDS: 1136,
    Emoji.PERFORMING_ARTS: 1137,
    Emoji.FRAMED_PICTURE: 1138,
    Emoji.ARTIST_PALETTE: 1139,
    Emoji.THREAD: 1140,
    Emoji.SEWING_NEEDLE: 1141,
    Emoji.YARN: 1142,
    Emoji.KNOT: 1143,
    Emoji.GLASSES: 1144,
    Emoji.SUNGLASSES: 1145,
    Emoji.GOGGLES: 1146,
    Emoji.LAB_COAT: 1147,
    Emoji.SAFETY_VEST: 1148,
    Emoji.NECKTIE: 1149,
    Emoji.T_SHIRT: 1150,
    Emoji.JEANS: 1151,
    Emoji.SCARF: 1152,
    Emoji.GLOVES: 1153,
    Emoji.COAT: 1154,
    Emoji.SOCKS: 1155,
    Emoji.DRESS: 1156,
    Emoji.KIMONO: 1157,
    Emoji.SARI: 1158,
    Emoji.ONE_PIECE_SWIMSUIT: 1159,
    Emoji.BRIEFS: 1160,
    Emoji.SHORTS: 1161,
    Emoji.BIKINI: 1162,
    Emoji.WOMANS_CLOTHES: 1163,
    Emoji.FOLDING_HAND_FAN: 1164,
    Emoji.PURSE: 1165,
    Emoji.HANDBAG: 1166,
    Emoji.CLUTCH_BAG: 1167,
    Emoji.SHOPPING_BAGS: 1168,
    Emoji.BACKPACK: 1169,
    Emoji.THONG_SANDAL: 1170,
    Emoji.MANS_SHOE: 1171,
    Emoji.RUNNING_SHOE: 1172,
    Emoji.HIKING_BOOT: 1173,
    Emoji.FLAT_SHOE: 1174,
    Emoji.HIGH_HEELED_SHOE: 1175,
    Emoji.WOMANS_SANDAL: 1176,
    Emoji.BALLET_SHOES: 1177,
    Emoji.WOMANS_BOOT: 1178,
    Emoji.HAIR_PICK: 1179,
    Emoji.CROWN: 1180,
    Emoji.WOMANS_HAT: 1181,
    Emoji.TOP_HAT: 1182,
    Emoji.GRADUATION_CAP: 1183,
    Emoji.BILLED_CAP: 1184,
    Emoji.MILITARY_HELMET: 1185,
    Emoji.RESCUE_WORKERS_HELMET: 1186,
    Emoji.PRAYER_BEADS: 1187,
    Emoji.LIPSTICK: 1188,
    Emoji.RING: 1189,
    Emoji.GEM_STONE: 1190,
    Emoji.MUTED_SPEAKER: 1191,
    Emoji.SPEAKER_LOW_VOLUME: 1192,
    Emoji.SPEAKER_MEDIUM_VOLUME: 1193,
    Emoji.SPEAKER_HIGH_VOLUME: 1194,
    Emoji.LOUDSPEAKER: 1195,
    Emoji.MEGAPHONE: 1196,
    Emoji.POSTAL_HORN: 1197,
    Emoji.BELL: 1198,
    Emoji.BELL_WITH_SLASH: 1199,
    Emoji.MUSICAL_SCORE: 1200,
    Emoji.MUSICAL_NOTE: 1201,
    Emoji.MUSICAL_NOTES: 1202,
    Emoji.STUDIO_MICROPHONE: 1203,
    Emoji.LEVEL_SLIDER: 1204,
    Emoji.CONTROL_KNOBS: 1205,
    Emoji.MICROPHONE: 1206,
    Emoji.HEADPHONE: 1207,
    Emoji.RADIO: 1208,
    Emoji.SAXOPHONE: 1209,
    Emoji.ACCORDION: 1210,
    Emoji.GUITAR: 1211,
    Emoji.MUSICAL_KEYBOARD: 1212,
    Emoji.TRUMPET: 1213,
    Emoji.VIOLIN: 1214,
    Emoji.BANJO: 1215,
    Emoji.DRUM: 1216,
    Emoji.LONG_DRUM: 1217,
    Emoji.MARACAS: 1218,
    Emoji.FLUTE: 1219,
    Emoji.MOBILE_PHONE: 1220,
    Emoji.MOBILE_PHONE_WITH_ARROW: 1221,
    Emoji.TELEPHONE: 1222,
    Emoji.TELEPHONE_RECEIVER: 1223,
    Emoji.PAGER: 1224,
    Emoji.FAX_MACHINE: 1225,
    Emoji.BATTERY: 1226,
    Emoji.LOW_BATTERY: 1227,
    Emoji.ELECTRIC_PLUG: 1228,
    Emoji.LAPTOP: 1229,
    Emoji.DESKTOP_COMPUTER: 1230,
    Emoji.PRINTER: 1231,
    Emoji.KEYBOARD: 1232,
    Emoji.COMPUTER_MOUSE: 1233,
    Emoji.TRACKBALL: 1234,
    Emoji.COMPUTER_DISK: 1235,
    Emoji.FLOPPY_DISK: 1236,
    Emoji.OPTICAL_DISK: 1237,
    Emoji.DVD: 1238,
    Emoji.ABACUS: 1239,
    Emoji.MOVIE_CAMERA: 1240,
    Emoji.FILM_FRAMES: 1241,
    Emoji.FILM_PROJECTOR: 1242,
    Emoji.CLAPPER_BOARD: 1243,
    Emoji.TELEVISION: 1244,
    Emoji.CAMERA: 1245,
    Emoji.CAMERA_WITH_FLASH: 1246,
    Emoji.VIDEO_CAMERA: 1247,
    Emoji.VIDEOCASSETTE: 1248,
    Emoji.MAGNIFYING_GLASS_TILTED_LEFT: 1249,
    Emoji.MAGNIFYING_GLASS_TILTED_RIGHT: 1250,
    Emoji.CANDLE: 1251,
    Emoji.LIGHT_BULB: 1252,
    Emoji.FLASHLIGHT: 1253,
    Emoji.RED_PAPER_LANTERN: 1254,
    Emoji.DIYA_LAMP: 1255,
    Emoji.NOTEBOOK_WITH_DECORATIVE_COVER: 1256,
    Emoji.CLOSED_BOOK: 1257,
    Emoji.OPEN_BOOK: 1258,
    Emoji.GREEN_BOOK: 1259,
    Emoji.BLUE_BOOK: 1260,
    Emoji.ORANGE_BOOK: 1261,
    Emoji.BOOKS: 1262,
    Emoji.NOTEBOOK: 1263,
    Emoji.LEDGER: 1264,
    Emoji.PAGE_WITH_CURL: 1265,
    Emoji.SCROLL: 1266,
    Emoji.PAGE_FACING_UP: 1267,
    Emoji.NEWSPAPER: 1268,
    Emoji.ROLLED_UP_NEWSPAPER: 1269,
    Emoji.BOOKMARK_TABS: 1270,
    Emoji.BOOKMARK: 1271,
    Emoji.LABEL: 1272,
    Emoji.MONEY_BAG: 1273,
    Emoji.COIN: 1274,
    Emoji.YEN_BANKNOTE: 1275,
    Emoji.DOLLAR_BANKNOTE: 1276,
    Emoji.EURO_BANKNOTE: 1277,
    Emoji.POUND_BANKNOTE: 1278,
    Emoji.MONEY_WITH_WINGS: 1279,
    Emoji.CREDIT_CARD: 1280,
    Emoji.RECEIPT: 1281,
    Emoji.CHART_INCREASING_WITH_YEN: 1282,
    Emoji.ENVELOPE: 1283,
    Emoji.E_MAIL: 1284,
    Emoji.INCOMING_ENVELOPE: 1285,
    Emoji.ENVELOPE_WITH_ARROW: 1286,
    Emoji.OUTBOX_TRAY: 1287,
    Emoji.INBOX_TRAY: 1288,
    Emoji.PACKAGE: 1289,
    Emoji.CLOSED_MAILBOX_WITH_RAISED_FLAG: 1290,
    Emoji.CLOSED_MAILBOX_WITH_LOWERED_FLAG: 1291,
    Emoji.OPEN_MAILBOX_WITH_RAISED_FLAG: 1292,
    Emoji.OPEN_MAILBOX_WITH_LOWERED_FLAG: 1293,
    Emoji.POSTBOX: 1294,
    Emoji.BALLOT_BOX_WITH_BALLOT: 1295,
    Emoji.PENCIL: 1296,
    Emoji.BLACK_NIB: 1297,
    Emoji.FOUNTAIN_PEN: 1298,
    Emoji.PEN: 1299,
    Emoji.PAINTBRUSH: 1300,
    Emoji.CRAYON: 1301,
    Emoji.MEMO: 1302,
    Emoji.BRIEFCASE: 1303,
    Emoji.FILE_FOLDER: 1304,
    Emoji.OPEN_FILE_FOLDER: 1305,
    Emoji.CARD_INDEX_DIVIDERS: 1306,
    Emoji.CALENDAR: 1307,
    Emoji.TEAR_OFF_CALENDAR: 1308,
    Emoji.SPIRAL_NOTEPAD: 1309,
    Emoji.SPIRAL_CALENDAR: 1310,
    Emoji.CARD_INDEX: 1311,
    Emoji.CHART_INCREASING: 1312,
    Emoji.CHART_DECREASING: 1313,
    Emoji.BAR_CHART: 1314,
    Emoji.CLIPBOARD: 1315,
    Emoji.PUSHPIN: 1316,
    Emoji.ROUND_PUSHPIN: 1317,
    Emoji.PAPERCLIP: 1318,
    Emoji.LINKED_PAPERCLIPS: 1319,
    Emoji.STRAIGHT_RULER: 1320,
    Emoji.TRIANGULAR_RULER: 1321,
    Emoji.SCISSORS: 1322,
    Emoji.CARD_FILE_BOX: 1323,
    Emoji.FILE_CABINET: 1324,
    Emoji.WASTEBASKET: 1325,
    Emoji.LOCKED: 1326,
    Emoji.UNLOCKED: 1327,
    Emoji.LOCKED_WITH_PEN: 1328,
    Emoji.LOCKED_WITH_KEY: 1329,
    Emoji.KEY: 1330,
    Emoji.OLD_KEY: 1331,
    Emoji.HAMMER: 1332,
    Emoji.AXE: 1333,
    Emoji.PICK: 1334,
    Emoji.HAMMER_AND_PICK: 1335,
    Emoji.HAMMER_AND_WRENCH: 1336,
    Emoji.DAGGER: 1337,
    Emoji.CROSSED_SWORDS: 1338,
    Emoji.BOMB: 1339,
    Emoji.BOOMERANG: 1340,
    Emoji.BOW_AND_ARROW: 1341,
    Emoji.SHIELD: 1342,
    Emoji.CARPENTRY_SAW: 1343,
    Emoji.WRENCH: 1344,
    Emoji.SCREWDRIVER: 1345,
    Emoji.NUT_AND_BOLT: 1346,
    Emoji.GEAR: 1347,
    Emoji.CLAMP: 1348,
    Emoji.BALANCE_SCALE: 1349,
    Emoji.WHITE_CANE: 1350,
    Emoji.LINK: 1351,
    Emoji.BROKEN_CHAIN: 1352,
    Emoji.CHAINS: 1353,
    Emoji.HOOK: 1354,
    Emoji.TOOLBOX: 1355,
    Emoji.MAGNET: 1356,
    Emoji.LADDER: 1357,
    Emoji.ALEMBIC: 1358,
    Emoji.TEST_TUBE: 1359,
    Emoji.PETRI_DISH: 1360,
    Emoji.DNA: 1361,
    Emoji.MICROSCOPE: 1362,
    Emoji.TELESCOPE: 1363,
    Emoji.SATELLITE_ANTENNA: 1364,
    Emoji.SYRINGE: 1365,
    Emoji.DROP_OF_BLOOD: 1366,
    Emoji.PILL: 1367,
    Emoji.ADHESIVE_BANDAGE: 1368,
    Emoji.CRUTCH: 1369,
    Emoji.STETHOSCOPE: 1370,
    Emoji.X_RAY: 1371,
    Emoji.DOOR: 1372,
    Emoji.ELEVATOR: 1373,
    Emoji.MIRROR: 1374,
    Emoji.WINDOW: 1375,
    Emoji.BED: 1376,
    Emoji.COUCH_AND_LAMP: 1377,
    Emoji.CHAIR: 1378,
    Emoji.TOILET: 1379,
    Emoji.PLUNGER: 1380,
    Emoji.SHOWER: 1381,
    Emoji.BATHTUB: 1382,
    Emoji.MOUSE_TRAP: 1383,
    Emoji.RAZOR: 1384,
    Emoji.LOTION_BOTTLE: 1385,
    Emoji.SAFETY_PIN: 1386,
    Emoji.BROOM: 1387,
    Emoji.BASKET: 1388,
    Emoji.ROLL_OF_PAPER: 1389,
    Emoji.BUCKET: 1390,
    Emoji.SOAP: 1391,
    Emoji.BUBBLES: 1392,
    Emoji.TOOTHBRUSH: 1393,
    Emoji.SPONGE: 1394,
    Emoji.FIRE_EXTINGUISHER: 1395,
    Emoji.SHOPPING_CART: 1396,
    Emoji.CIGARETTE: 1397,
    Emoji.COFFIN: 1398,
    Emoji.HEADSTONE: 1399,
    Emoji.FUNERAL_URN: 1400,
    Emoji.NAZAR_AMULET: 1401,
    Emoji.HAMSA: 1402,
    Emoji.MOAI: 1403,
    Emoji.PLACARD: 1404,
    Emoji.IDENTIFICATION_CARD: 1405,
    Emoji.ATM_SIGN: 1406,
    Emoji.LITTER_IN_BIN_SIGN: 1407,
    Emoji.POTABLE_WATER: 1408,
    Emoji.WHEELCHAIR_SYMBOL: 1409,
    Emoji.MENS_ROOM: 1410,
    Emoji.WOMENS_ROOM: 1411,
    Emoji.RESTROOM: 1412,
    Emoji.BABY_SYMBOL: 1413,
    Emoji.WATER_CLOSET: 1414,
    Emoji.PASSPORT_CONTROL: 1415,
    Emoji.CUSTOMS: 1416,
    Emoji.BAGGAGE_CLAIM: 1417,
    Emoji.LEFT_LUGGAGE: 1418,
    Emoji.WARNING: 1419,
    Emoji.CHILDREN_CROSSING: 1420,
    Emoji.NO_ENTRY: 1421,
    Emoji.PROHIBITED: 1422,
    Emoji.NO_BICYCLES: 1423,
    Emoji.NO_SMOKING: 1424,
    Emoji.NO_LITTERING: 1425,
    Emoji.NON_POTABLE_WATER: 1426,
    Emoji.NO_PEDESTRIANS: 1427,
    Emoji.NO_MOBILE_PHONES: 1428,
    Emoji.NO_ONE_UNDER_EIGHTEEN: 1429,
    Emoji.RADIOACTIVE: 1430,
    Emoji.BIOHAZARD: 1431,
    Emoji.UP_ARROW: 1432,
    Emoji.UP_RIGHT_ARROW: 1433,
    Emoji.RIGHT_ARROW: 1434,
    Emoji.DOWN_RIGHT_ARROW: 1435,
    Emoji.DOWN_ARROW: 1436,
    Emoji.DOWN_LEFT_ARROW: 1437,
    Emoji.LEFT_ARROW: 1438,
    Emoji.UP_LEFT_ARROW: 1439,
    Emoji.UP_DOWN_ARROW: 1440,
    Emoji.LEFT_RIGHT_ARROW: 1441,
    Emoji.RIGHT_ARROW_CURVING_LEFT: 1442,
    Emoji.LEFT_ARROW_CURVING_RIGHT: 1443,
    Emoji.RIGHT_ARROW_CURVING_UP: 1444,
    Emoji.RIGHT_ARROW_CURVING_DOWN: 1445,
    Emoji.CLOCKWISE_VERTICAL_ARROWS: 1446,
    Emoji.COUNTERCLOCKWISE_ARROWS_BUTTON: 1447,
    Emoji.BACK_ARROW: 1448,
    Emoji.END_ARROW: 1449,
    Emoji.ON_ARROW: 1450,
    Emoji.SOON_ARROW: 1451,
    Emoji.TOP_ARROW: 1452,
    Emoji.PLACE_OF_WORSHIP: 1453,
    Emoji.ATOM_SYMBOL: 1454,
    Emoji.OM: 1455,
    Emoji.STAR_OF_DAVID: 1456,
    Emoji.WHEEL_OF_DHARMA: 1457,
    Emoji.YIN_YANG: 1458,
    Emoji.LATIN_CROSS: 1459,
    Emoji.ORTHODOX_CROSS: 1460,
    Emoji.STAR_AND_CRESCENT: 1461,
    Emoji.PEACE_SYMBOL: 1462,
    Emoji.MENORAH: 1463,
    Emoji.DOTTED_SIX_POINTED_STAR: 1464,
    Emoji.KHANDA: 1465,
    Emoji.ARIES: 1466,
    Emoji.TAURUS: 1467,
    Emoji.GEMINI: 1468,
    Emoji.CANCER: 1469,
    Emoji.LEO: 1470,
    Emoji.VIRGO: 1471,
    Emoji.LIBRA: 1472,
    Emoji.SCORPIO: 1473,
    Emoji.SAGITTARIUS: 1474,
    Emoji.CAPRICORN: 1475,
    Emoji.AQUARIUS: 1476,
    Emoji.PISCES: 1477,
    Emoji.OPHIUCHUS: 1478,
    Emoji.SHUFFLE_TRACKS_BUTTON: 1479,
    Emoji.REPEAT_BUTTON: 1480,
    Emoji.REPEAT_SINGLE_BUTTON: 1481,
    Emoji.PLAY_BUTTON: 1482,
    Emoji.FAST_FORWARD_BUTTON: 1483,
    Emoji.NEXT_TRACK_BUTTON: 1484,
    Emoji.PLAY_OR_PAUSE_BUTTON: 1485,
    Emoji.REVERSE_BUTTON: 1486,
    Emoji.FAST_REVERSE_BUTTON: 1487,
    Emoji.LAST_TRACK_BUTTON: 1488,
    Emoji.UPWARDS_BUTTON: 1489,
    Emoji.FAST_UP_BUTTON: 1490,
    Emoji.DOWNWARDS_BUTTON: 1491,
    Emoji.FAST_DOWN_BUTTON: 1492,
    Emoji.PAUSE_BUTTON: 1493,
    Emoji.STOP_BUTTON: 1494,
    Emoji.RECORD_BUTTON: 1495,
    Emoji.EJECT_BUTTON: 1496,
    Emoji.CINEMA: 1497,
    Emoji.DIM_BUTTON: 1498,
    Emoji.BRIGHT_BUTTON: 1499,
    Emoji.ANTENNA_BARS: 1500,
    Emoji.WIRELESS: 1501,
    Emoji.VIBRATION_MODE: 1502,
    Emoji.MOBILE_PHONE_OFF: 1503,
    Emoji.FEMALE_SIGN: 1504,
    Emoji.MALE_SIGN: 1505,
    Emoji.TRANSGENDER_SYMBOL: 1506,
    Emoji.MULTIPLY: 1507,
    Emoji.PLUS: 1508,
    Emoji.MINUS: 1509,
    Emoji.DIVIDE: 1510,
    Emoji.HEAVY_EQUALS_SIGN: 1511,
    Emoji.INFINITY: 1512,
    Emoji.DOUBLE_EXCLAMATION_MARK: 1513,
    Emoji.EXCLAMATION_QUESTION_MARK: 1514,
    Emoji.RED_QUESTION_MARK: 1515,
    Emoji.WHITE_QUESTION_MARK: 1516,
    Emoji.WHITE_EXCLAMATION_MARK: 1517,
    Emoji.RED_EXCLAMATION_MARK: 1518,
    Emoji.WAVY_DASH: 1519,
    Emoji.CURRENCY_EXCHANGE: 1520,
    Emoji.HEAVY_DOLLAR_SIGN: 1521,
    Emoji.MEDICAL_SYMBOL: 1522,
    Emoji.RECYCLING_SYMBOL: 1523,
    Emoji.FLEUR_DE_LIS: 1524,
    Emoji.TRIDENT_EMBLEM: 1525,
    Emoji.NAME_BADGE: 1526,
    Emoji.JAPANESE_SYMBOL_FOR_BEGINNER: 1527,
    Emoji.HOLLOW_RED_CIRCLE: 1528,
    Emoji.CHECK_MARK_BUTTON: 1529,
    Emoji.CHECK_BOX_WITH_CHECK: 1530,
    Emoji.CHECK_MARK: 1531,
    Emoji.CROSS_MARK: 1532,
    Emoji.CROSS_MARK_BUTTON: 1533,
    Emoji.CURLY_LOOP: 1534,
    Emoji.DOUBLE_CURLY_LOOP: 1535,
    Emoji.PART_ALTERNATION_MARK: 1536,
    Emoji.EIGHT_SPOKED_ASTERISK: 1537,
    Emoji.EIGHT_POINTED_STAR: 1538,
    Emoji.SPARKLE: 1539,
    Emoji.COPYRIGHT: 1540,
    Emoji.REGISTERED: 1541,
    Emoji.TRADE_MARK: 1542,
    Emoji.KEYCAP_NUMBER_SIGN: 1543,
    Emoji.KEYCAP_ASTERISK: 1544,
    Emoji.KEYCAP_0: 1545,
    Emoji.KEYCAP_1: 1546,
    Emoji.KEYCAP_2: 1547,
    Emoji.KEYCAP_3: 1548,
    Emoji.KEYCAP_4: 1549,
    Emoji.KEYCAP_5: 1550,
    Emoji.KEYCAP_6: 1551,
    Emoji.KEYCAP_7: 1552,
    Emoji.KEYCAP_8: 1553,
    Emoji.KEYCAP_9: 1554,
    Emoji.KEYCAP_10: 1555,
    Emoji.INPUT_LATIN_UPPERCASE: 1556,
    Emoji.INPUT_LATIN_LOWERCASE: 1557,
    Emoji.INPUT_NUMBERS: 1558,
    Emoji.INPUT_SYMBOLS: 1559,
    Emoji.INPUT_LATIN_LETTERS: 1560,
    Emoji.A_BUTTON_BLOOD_TYPE: 1561,
    Emoji.AB_BUTTON_BLOOD_TYPE: 1562,
    Emoji.B_BUTTON_BLOOD_TYPE: 1563,
    Emoji.CL_BUTTON: 1564,
    Emoji.COOL_BUTTON: 1565,
    Emoji.FREE_BUTTON: 1566,
    Emoji.INFORMATION: 1567,
    Emoji.ID_BUTTON: 1568,
    Emoji.CIRCLED_M: 1569,
    Emoji.NEW_BUTTON: 1570,
    Emoji.NG_BUTTON: 1571,
    Emoji.O_BUTTON_BLOOD_TYPE: 1572,
    Emoji.OK_BUTTON: 1573,
    Emoji.P_BUTTON: 1574,
    Emoji.SOS_BUTTON: 1575,
    Emoji.UP_BUTTON: 1576,
    Emoji.VS_BUTTON: 1577,
    Emoji.JAPANESE_HERE_BUTTON: 1578,
    Emoji.JAPANESE_SERVICE_CHARGE_BUTTON: 1579,
    Emoji.JAPANESE_MONTHLY_AMOUNT_BUTTON: 1580,
    Emoji.JAPANESE_NOT_FREE_OF_CHARGE_BUTTON: 1581,
    Emoji.JAPANESE_RESERVED_BUTTON: 1582,
    Emoji.JAPANESE_BARGAIN_BUTTON: 1583,
    Emoji.JAPANESE_DISCOUNT_BUTTON: 1584,
    Emoji.JAPANESE_FREE_OF_CHARGE_BUTTON: 1585,
    Emoji.JAPANESE_PROHIBITED_BUTTON: 1586,
    Emoji.JAPANESE_ACCEPTABLE_BUTTON: 1587,
    Emoji.JAPANESE_APPLICATION_BUTTON: 1588,
    Emoji.JAPANESE_PASSING_GRADE_BUTTON: 1589,
    Emoji.JAPANESE_VACANCY_BUTTON: 1590,
    Emoji.JAPANESE_CONGRATULATIONS_BUTTON: 1591,
    Emoji.JAPANESE_SECRET_BUTTON: 1592,
    Emoji.JAPANESE_OPEN_FOR_BUSINESS_BUTTON: 1593,
    Emoji.JAPANESE_NO_VACANCY_BUTTON: 1594,
    Emoji.RED_CIRCLE: 1595,
    Emoji.ORANGE_CIRCLE: 1596,
    Emoji.YELLOW_CIRCLE: 1597,
    Emoji.GREEN_CIRCLE: 1598,
    Emoji.BLUE_CIRCLE: 1599,
    Emoji.PURPLE_CIRCLE: 1600,
    Emoji.BROWN_CIRCLE: 1601,
    Emoji.BLACK_CIRCLE: 1602,
    Emoji.WHITE_CIRCLE: 1603,
    Emoji.RED_SQUARE: 1604,
    Emoji.ORANGE_SQUARE: 1605,
    Emoji.YELLOW_SQUARE: 1606,
    Emoji.GREEN_SQUARE: 1607,
    Emoji.BLUE_SQUARE: 1608,
    Emoji.PURPLE_SQUARE: 1609,
    Emoji.BROWN_SQUARE: 1610,
    Emoji.BLACK_LARGE_SQUARE: 1611,
    Emoji.WHITE_LARGE_SQUARE: 1612,
    Emoji.BLACK_MEDIUM_SQUARE: 1613,
    Emoji.WHITE_MEDIUM_SQUARE: 1614,
    Emoji.BLACK_MEDIUM_SMALL_SQUARE: 1615,
    Emoji.WHITE_MEDIUM_SMALL_SQUARE: 1616,
    Emoji.BLACK_SMALL_SQUARE: 1617,
    Emoji.WHITE_SMALL_SQUARE: 1618,
    Emoji.LARGE_ORANGE_DIAMOND: 1619,
    Emoji.LARGE_BLUE_DIAMOND: 1620,
    Emoji.SMALL_ORANGE_DIAMOND: 1621,
    Emoji.SMALL_BLUE_DIAMOND: 1622,
    Emoji.RED_TRIANGLE_POINTED_UP: 1623,
    Emoji.RED_TRIANGLE_POINTED_DOWN: 1624,
    Emoji.DIAMOND_WITH_A_DOT: 1625,
    Emoji.RADIO_BUTTON: 1626,
    Emoji.WHITE_SQUARE_BUTTON: 1627,
    Emoji.BLACK_SQUARE_BUTTON: 1628,
    Emoji.CHEQUERED_FLAG: 1629,
    Emoji.TRIANGULAR_FLAG: 1630,
    Emoji.CROSSED_FLAGS: 1631,
    Emoji.BLACK_FLAG: 1632,
    Emoji.WHITE_FLAG: 1633,
    Emoji.RAINBOW_FLAG: 1634,
    Emoji.TRANSGENDER_FLAG: 1635,
    Emoji.PIRATE_FLAG: 1636,
    Emoji.FLAG_ASCENSION_ISLAND: 1637,
    Emoji.FLAG_ANDORRA: 1638,
    Emoji.FLAG_UNITED_ARAB_EMIRATES: 1639,
    Emoji.FLAG_AFGHANISTAN: 1640,
    Emoji.FLAG_ANTIGUA_AND_BARBUDA: 1641,
    Emoji.FLAG_ANGUILLA: 1642,
    Emoji.FLAG_ALBANIA: 1643,
    Emoji.FLAG_ARMENIA: 1644,
    Emoji.FLAG_ANGOLA: 1645,
    Emoji.FLAG_ANTARCTICA: 1646,
    Emoji.FLAG_ARGENTINA: 1647,
    Emoji.FLAG_AMERICAN_SAMOA: 1648,
    Emoji.FLAG_AUSTRIA: 1649,
    Emoji.FLAG_AUSTRALIA: 1650,
    Emoji.FLAG_ARUBA: 1651,
    Emoji.FLAG_ALAND_ISLANDS: 1652,
    Emoji.FLAG_AZERBAIJAN: 1653,
    Emoji.FLAG_BOSNIA_AND_HERZEGOVINA: 1654,
    Emoji.FLAG_BARBADOS: 1655,
    Emoji.FLAG_BANGLADESH: 1656,
    Emoji.FLAG_BELGIUM: 1657,
    Emoji.FLAG_BURKINA_FASO: 1658,
    Emoji.FLAG_BULGARIA: 1659,
    Emoji.FLAG_BAHRAIN: 1660,
    Emoji.FLAG_BURUNDI: 1661,
    Emoji.FLAG_BENIN: 1662,
    Emoji.FLAG_ST_BARTHELEMY: 1663,
    Emoji.FLAG_BERMUDA: 1664,
    Emoji.FLAG_BRUNEI: 1665,
    Emoji.FLAG_BOLIVIA: 1666,
    Emoji.FLAG_CARIBBEAN_NETHERLANDS: 1667,
    Emoji.FLAG_BRAZIL: 1668,
    Emoji.FLAG_BAHAMAS: 1669,
    Emoji.FLAG_BHUTAN: 1670,
    Emoji.FLAG_BOUVET_ISLAND: 1671,
    Emoji.FLAG_BOTSWANA: 1672,
    Emoji.FLAG_BELARUS: 1673,
    Emoji.FLAG_BELIZE: 1674,
    Emoji.FLAG_CANADA: 1675,
    Emoji.FLAG_COCOS_KEELING_ISLANDS: 1676,
    Emoji.FLAG_CONGO_KINSHASA: 1677,
    Emoji.FLAG_CENTRAL_AFRICAN_REPUBLIC: 1678,
    Emoji.FLAG_CONGO_BRAZZAVILLE: 1679,
    Emoji.FLAG_SWITZERLAND: 1680,
    Emoji.FLAG_COTE_DIVOIRE: 1681,
    Emoji.FLAG_COOK_ISLANDS: 1682,
    Emoji.FLAG_CHILE: 1683,
    Emoji.FLAG_CAMEROON: 1684,
    Emoji.FLAG_CHINA: 1685,
    Emoji.FLAG_COLOMBIA: 1686,
    Emoji.FLAG_CLIPPERTON_ISLAND: 1687,
    Emoji.FLAG_COSTA_RICA: 1688,
    Emoji.FLAG_CUBA: 1689,
    Emoji.FLAG_CAPE_VERDE: 1690,
    Emoji.FLAG_CURACAO: 1691,
    Emoji.FLAG_CHRISTMAS_ISLAND: 1692,
    Emoji.FLAG_CYPRUS: 1693,
    Emoji.FLAG_CZECHIA: 1694,
    Emoji.FLAG_GERMANY: 1695,
    Emoji.FLAG_DIEGO_GARCIA: 1696,
    Emoji.FLAG_DJIBOUTI: 1697,
    Emoji.FLAG_DENMARK: 1698,
    Emoji.FLAG_DOMINICA: 1699,
    Emoji.FLAG_DOMINICAN_REPUBLIC: 1700,
    Emoji.FLAG_ALGERIA: 1701,
    Emoji.FLAG_CEUTA_AND_MELILLA: 1702,
    Emoji.FLAG_ECUADOR: 1703,
    Emoji.FLAG_ESTONIA: 1704,
    Emoji.FLAG_EGYPT: 1705,
    Emoji.FLAG_WESTERN_SAHARA: 1706,
    Emoji.FLAG_ERITREA: 1707,
    Emoji.FLAG_SPAIN: 1708,
    Emoji.FLAG_ETHIOPIA: 1709,
    Emoji.FLAG_EUROPEAN_UNION: 1710,
    Emoji.FLAG_FINLAND: 1711,
    Emoji.FLAG_FIJI: 1712,
    Emoji.FLAG_FALKLAND_ISLANDS: 1713,
    Emoji.FLAG_MICRONESIA: 1714,
    Emoji.FLAG_FAROE_ISLANDS: 1715,
    Emoji.FLAG_FRANCE: 1716,
    Emoji.FLAG_GABON: 1717,
    Emoji.FLAG_UNITED_KINGDOM: 1718,
    Emoji.FLAG_GRENADA: 1719,
    Emoji.FLAG_GEORGIA: 1720,
    Emoji.FLAG_FRENCH_GUIANA: 1721,
    Emoji.FLAG_GUERNSEY: 1722,
    Emoji.FLAG_GHANA: 1723,
    Emoji.FLAG_GIBRALTAR: 1724,
    Emoji.FLAG_GREENLAND: 1725,
    Emoji.FLAG_GAMBIA: 1726,
    Emoji.FLAG_GUINEA: 1727,
    Emoji.FLAG_GUADELOUPE: 1728,
    Emoji.FLAG_EQUATORIAL_GUINEA: 1729,
    Emoji.FLAG_GREECE: 1730,
    Emoji.FLAG_SOUTH_GEORGIA_AND_SOUTH_SANDWICH_ISLANDS: 1731,
    Emoji.FLAG_GUATEMALA: 1732,
    Emoji.FLAG_GUAM: 1733,
    Emoji.FLAG_GUINEA_BISSAU: 1734,
    Emoji.FLAG_GUYANA: 1735,
    Emoji.FLAG_HONG_KONG_SAR_CHINA: 1736,
    Emoji.FLAG_HEARD_AND_MCDONALD_ISLANDS: 1737,
    Emoji.FLAG_HONDURAS: 1738,
    Emoji.FLAG_CROATIA: 1739,
    Emoji.FLAG_HAITI: 1740,
    Emoji.FLAG_HUNGARY: 1741,
    Emoji.FLAG_CANARY_ISLANDS: 1742,
    Emoji.FLAG_INDONESIA: 1743,
    Emoji.FLAG_IRELAND: 1744,
    Emoji.FLAG_ISRAEL: 1745,
    Emoji.FLAG_ISLE_OF_MAN: 1746,
    Emoji.FLAG_INDIA: 1747,
    Emoji.FLAG_BRITISH_INDIAN_OCEAN_TERRITORY: 1748,
    Emoji.FLAG_IRAQ: 1749,
    Emoji.FLAG_IRAN: 1750,
    Emoji.FLAG_ICELAND: 1751,
    Emoji.FLAG_ITALY: 1752,
    Emoji.FLAG_JERSEY: 1753,
    Emoji.FLAG_JAMAICA: 1754,
    Emoji.FLAG_JORDAN: 1755,
    Emoji.FLAG_JAPAN: 1756,
    Emoji.FLAG_KENYA: 1757,
    Emoji.FLAG_KYRGYZSTAN: 1758,
    Emoji.FLAG_CAMBODIA: 1759,
    Emoji.FLAG_KIRIBATI: 1760,
    Emoji.FLAG_COMOROS: 1761,
    Emoji.FLAG_ST_KITTS_AND_NEVIS: 1762,
    Emoji.FLAG_NORTH_KOREA: 1763,
    Emoji.FLAG_SOUTH_KOREA: 1764,
    Emoji.FLAG_KUWAIT: 1765,
    Emoji.FLAG_CAYMAN_ISLANDS: 1766,
    Emoji.FLAG_KAZAKHSTAN: 1767,
    Emoji.FLAG_LAOS: 1768,
    Emoji.FLAG_LEBANON: 1769,
    Emoji.FLAG_ST_LUCIA: 1770,
    Emoji.FLAG_LIECHTENSTEIN: 1771,
    Emoji.FLAG_SRI_LANKA: 1772,
    Emoji.FLAG_LIBERIA: 1773,
    Emoji.FLAG_LESOTHO: 1774,
    Emoji.FLAG_LITHUANIA: 1775,
    Emoji.FLAG_LUXEMBOURG: 1776,
    Emoji.FLAG_LATVIA: 1777,
    Emoji.FLAG_LIBYA: 1778,
    Emoji.FLAG_MOROCCO: 1779,
    Emoji.FLAG_MONACO: 1780,
    Emoji.FLAG_MOLDOVA: 1781,
    Emoji.FLAG_MONTENEGRO: 1782,
    Emoji.FLAG_ST_MARTIN: 1783,
    Emoji.FLAG_MADAGASCAR: 1784,
    Emoji.FLAG_MARSHALL_ISLANDS: 1785,
    Emoji.FLAG_NORTH_MACEDONIA: 1786,
    Emoji.FLAG_MALI: 1787,
    Emoji.FLAG_MYANMAR_BURMA: 1788,
    Emoji.FLAG_MONGOLIA: 1789,
    Emoji.FLAG_MACAO_SAR_CHINA: 1790,
    Emoji.FLAG_NORTHERN_MARIANA_ISLANDS: 1791,
    Emoji.FLAG_MARTINIQUE: 1792,
    Emoji.FLAG_MAURITANIA: 1793,
    Emoji.FLAG_MONTSERRAT: 1794,
    Emoji.FLAG_MALTA: 1795,
    Emoji.FLAG_MAURITIUS: 1796,
    Emoji.FLAG_MALDIVES: 1797,
    Emoji.FLAG_MALAWI: 1798,
    Emoji.FLAG_MEXICO: 1799,
    Emoji.FLAG_MALAYSIA: 1800,
    Emoji.FLAG_MOZAMBIQUE: 1801,
    Emoji.FLAG_NAMIBIA: 1802,
    Emoji.FLAG_NEW_CALEDONIA: 1803,
    Emoji.FLAG_NIGER: 1804,
    Emoji.FLAG_NORFOLK_ISLAND: 1805,
    Emoji.FLAG_NIGERIA: 1806,
    Emoji.FLAG_NICARAGUA: 1807,
    Emoji.FLAG_NETHERLANDS: 1808,
    Emoji.FLAG_NORWAY: 1809,
    Emoji.FLAG_NEPAL: 1810,
    Emoji.FLAG_NAURU: 1811,
    Emoji.FLAG_NIUE: 1812,
    Emoji.FLAG_NEW_ZEALAND: 1813,
    Emoji.FLAG_OMAN: 1814,
    Emoji.FLAG_PANAMA: 1815,
    Emoji.FLAG_PERU: 1816,
    Emoji.FLAG_FRENCH_POLYNESIA: 1817,
    Emoji.FLAG_PAPUA_NEW_GUINEA: 1818,
    Emoji.FLAG_PHILIPPINES: 1819,
    Emoji.FLAG_PAKISTAN: 1820,
    Emoji.FLAG_POLAND: 1821,
    Emoji.FLAG_ST_PIERRE_AND_MIQUELON: 1822,
    Emoji.FLAG_PITCAIRN_ISLANDS: 1823,
    Emoji.FLAG_PUERTO_RICO: 1824,
    Emoji.FLAG_PALESTINIAN_TERRITORIES: 1825,
    Emoji.FLAG_PORTUGAL: 1826,
    Emoji.FLAG_PALAU: 1827,
    Emoji.FLAG_PARAGUAY: 1828,
    Emoji.FLAG_QATAR: 1829,
    Emoji.FLAG_REUNION: 1830,
    Emoji.FLAG_ROMANIA: 1831,
    Emoji.FLAG_SERBIA: 1832,
    Emoji.FLAG_RUSSIA: 1833,
    Emoji.FLAG_RWANDA: 1834,
    Emoji.FLAG_SAUDI_ARABIA: 1835,
    Emoji.FLAG_SOLOMON_ISLANDS: 1836,
    Emoji.FLAG_SEYCHELLES: 1837,
    Emoji.FLAG_SUDAN: 1838,
    Emoji.FLAG_SWEDEN: 1839,
    Emoji.FLAG_SINGAPORE: 1840,
    Emoji.FLAG_ST_HELENA: 1841,
    Emoji.FLAG_SLOVENIA: 1842,
    Emoji.FLAG_SVALBARD_AND_JAN_MAYEN: 1843,
    Emoji.FLAG_SLOVAKIA: 1844,
    Emoji.FLAG_SIERRA_LEONE: 1845,
    Emoji.FLAG_SAN_MARINO: 1846,
    Emoji.FLAG_SENEGAL: 1847,
    Emoji.FLAG_SOMALIA: 1848,
    Emoji.FLAG_SURINAME: 1849,
    Emoji.FLAG_SOUTH_SUDAN: 1850,
    Emoji.FLAG_SAO_TOME_AND_PRINCIPE: 1851,
    Emoji.FLAG_EL_SALVADOR: 1852,
    Emoji.FLAG_SINT_MAARTEN: 1853,
    Emoji.FLAG_SYRIA: 1854,
    Emoji.FLAG_ESWATINI: 1855,
    Emoji.FLAG_TRISTAN_DA_CUNHA: 1856,
    Emoji.FLAG_TURKS_AND_CAICOS_ISLANDS: 1857,
    Emoji.FLAG_CHAD: 1858,
    Emoji.FLAG_FRENCH_SOUTHERN_TERRITORIES: 1859,
    Emoji.FLAG_TOGO: 1860,
    Emoji.FLAG_THAILAND: 1861,
    Emoji.FLAG_TAJIKISTAN: 1862,
    Emoji.FLAG_TOKELAU: 1863,
    Emoji.FLAG_TIMOR_LESTE: 1864,
    Emoji.FLAG_TURKMENISTAN: 1865,
    Emoji.FLAG_TUNISIA: 1866,
    Emoji.FLAG_TONGA: 1867,
    Emoji.FLAG_TURKIYE: 1868,
    Emoji.FLAG_TRINIDAD_AND_TOBAGO: 1869,
    Emoji.FLAG_TUVALU: 1870,
    Emoji.FLAG_TAIWAN: 1871,
    Emoji.FLAG_TANZANIA: 1872,
    Emoji.FLAG_UKRAINE: 1873,
    Emoji.FLAG_UGANDA: 1874,
    Emoji.FLAG_U_S_OUTLYING_ISLANDS: 1875,
    Emoji.FLAG_UNITED_NATIONS: 1876,
    Emoji.FLAG_UNITED_STATES: 1877,
    Emoji.FLAG_URUGUAY: 1878,
    Emoji.FLAG_UZBEKISTAN: 1879,
    Emoji.FLAG_VATICAN_CITY: 1880,
    Emoji.FLAG_ST_VINCENT_AND_GRENADINES: 1881,
    Emoji.FLAG_VENEZUELA: 1882,
    Emoji.FLAG_BRITISH_VIRGIN_ISLANDS: 1883,
    Emoji.FLAG_U_S_VIRGIN_ISLANDS: 1884,
    Emoji.FLAG_VIETNAM: 1885,
    Emoji.FLAG_VANUATU: 1886,
    Emoji.FLAG_WALLIS_AND_FUTUNA: 1887,
    Emoji.FLAG_SAMOA: 1888,
    Emoji.FLAG_KOSOVO: 1889,
    Emoji.FLAG_YEMEN: 1890,
    Emoji.FLAG_MAYOTTE: 1891,
    Emoji.FLAG_SOUTH_AFRICA: 1892,
    Emoji.FLAG_ZAMBIA: 1893,
    Emoji.FLAG_ZIMBABWE: 1894,
    Emoji.FLAG_ENGLAND: 1895,
    Emoji.FLAG_SCOTLAND: 1896,
    Emoji.FLAG_WALES: 1897,
}

EMOJI_VERSIONS: Final[dict[Emoji, float]] = {
    Emoji.GRINNING_FACE: 1.0,
    Emoji.GRINNING_FACE_WITH_BIG_EYES: 0.6,
    Emoji.GRINNING_FACE_WITH_SMILING_EYES: 0.6,
    Emoji.BEAMING_FACE_WITH_SMILING_EYES: 0.6,
    Emoji.GRINNING_SQUINTING_FACE: 0.6,
    Emoji.GRINNING_FACE_WITH_SWEAT: 0.6,
    Emoji.ROLLING_ON_THE_FLOOR_LAUGHING: 3.0,
    Emoji.FACE_WITH_TEARS_OF_JOY: 0.6,
    Emoji.SLIGHTLY_SMILING_FACE: 1.0,
    Emoji.UPSIDE_DOWN_FACE: 1.0,
    Emoji.MELTING_FACE: 14.0,
    Emoji.WINKING_FACE: 0.6,
    Emoji.SMILING_FACE_WITH_SMILING_EYES: 0.6,
    Emoji.SMILING_FACE_WITH_HALO: 1.0,
    Emoji.SMILING_FACE_WITH_HEARTS: 11.0,
    Emoji.SMILING_FACE_WITH_HEART_EYES: 0.6,
    Emoji.STAR_STRUCK: 5.0,
    Emoji.FACE_BLOWING_A_KISS: 0.6,
    Emoji.KISSING_FACE: 1.0,
    Emoji.SMILING_FACE: 0.6,
    Emoji.KISSING_FACE_WITH_CLOSED_EYES: 0.6,
    Emoji.KISSING_FACE_WITH_SMILING_EYES: 1.0,
    Emoji.SMILING_FACE_WITH_TEAR: 13.0,
    Emoji.FACE_SAVORING_FOOD: 0.6,
    Emoji.FACE_WITH_TONGUE: 1.0,
    Emoji.WINKING_FACE_WITH_TONGUE: 0.6,
    Emoji.ZANY_FACE: 5.0,
    Emoji.SQUINTING_FACE_WITH_TONGUE: 0.6,
    Emoji.MONEY_MOUTH_FACE: 1.0,
    Emoji.SMILING_FACE_WITH_OPEN_HANDS: 1.0,
    Emoji.FACE_WITH_HAND_OVER_MOUTH: 5.0,
    Emoji.FACE_WITH_OPEN_EYES_AND_HAND_OVER_MOUTH: 14.0,
    Emoji.FACE_WITH_PEEKING_EYE: 14.0,
    Emoji.SHUSHING_FACE: 5.0,
    Emoji.THINKING_FACE: 1.0,
    Emoji.SALUTING_FACE: 14.0,
    Emoji.ZIPPER_MOUTH_FACE: 1.0,
    Emoji.FACE_WITH_RAISED_EYEBROW: 5.0,
    Emoji.NEUTRAL_FACE: 0.7,
    Emoji.EXPRESSIONLESS_FACE: 1.0,
    Emoji.FACE_WITHOUT_MOUTH: 1.0,
    Emoji.DOTTED_LINE_FACE: 14.0,
    Emoji.FACE_IN_CLOUDS: 13.1,
    Emoji.SMIRKING_FACE: 0.6,
    Emoji.UNAMUSED_FACE: 0.6,
    Emoji.FACE_WITH_ROLLING_EYES: 1.0,
    Emoji.GRIMACING_FACE: 1.0,
    Emoji.FACE_EXHALING: 13.1,
    Emoji.LYING_FACE: 3.0,
    Emoji.SHAKING_FACE: 15.0,
    Emoji.HEAD_SHAKING_HORIZONTALLY: 15.1,
    Emoji.HEAD_SHAKING_VERTICALLY: 15.1,
    Emoji.RELIEVED_FACE: 0.6,
    Emoji.PENSIVE_FACE: 0.6,
    Emoji.SLEEPY_FACE: 0.6,
    Emoji.DROOLING_FACE: 3.0,
    Emoji.SLEEPING_FACE: 1.0,
    Emoji.FACE_WITH_MEDICAL_MASK: 0.6,
    Emoji.FACE_WITH_THERMOMETER: 1.0,
    Emoji.FACE_WITH_HEAD_BANDAGE: 1.0,
    Emoji.NAUSEATED_FACE: 3.0,
    Emoji.FACE_VOMITING: 5.0,
    Emoji.SNEEZING_FACE: 3.0,
    Emoji.HOT_FACE: 11.0,
    Emoji.COLD_FACE: 11.0,
    Emoji.WOOZY_FACE: 11.0,
    Emoji.FACE_WITH_CROSSED_OUT_EYES: 0.6,
    Emoji.FACE_WITH_SPIRAL_EYES: 13.1,
    Emoji.EXPLODING_HEAD: 5.0,
    Emoji.COWBOY_HAT_FACE: 3.0,
    Emoji.PARTYING_FACE: 11.0,
    Emoji.DISGUISED_FACE: 13.0,
    Emoji.SMILING_FACE_WITH_SUNGLASSES: 1.0,
    Emoji.NERD_FACE: 1.0,
    Emoji.FACE_WITH_MONOCLE: 5.0,
    Emoji.CONFUSED_FACE: 1.0,
    Emoji.FACE_WITH_DIAGONAL_MOUTH: 14.0,
    Emoji.WORRIED_FACE: 1.0,
    Emoji.SLIGHTLY_FROWNING_FACE: 1.0,
    Emoji.FROWNING_FACE: 0.7,
    Emoji.FACE_WITH_OPEN_MOUTH: 1.0,
    Emoji.HUSHED_FACE: 1.0,
    Emoji.ASTONISHED_FACE: 0.6,
    Emoji.FLUSHED_FACE: 0.6,
    Emoji.PLEADING_FACE: 11.0,
    Emoji.FACE_HOLDING_BACK_TEARS: 14.0,
    Emoji.FROWNING_FACE_WITH_OPEN_MOUTH: 1.0,
    Emoji.ANGUISHED_FACE: 1.0,
    Emoji.FEARFUL_FACE: 0.6,
    Emoji.ANXIOUS_FACE_WITH_SWEAT: 0.6,
    Emoji.SAD_BUT_RELIEVED_FACE: 0.6,
    Emoji.CRYING_FACE: 0.6,
    Emoji.LOUDLY_CRYING_FACE: 0.6,
    Emoji.FACE_SCREAMING_IN_FEAR: 0.6,
    Emoji.CONFOUNDED_FACE: 0.6,
    Emoji.PERSEVERING_FACE: 0.6,
    Emoji.DISAPPOINTED_FACE: 0.6,
    Emoji.DOWNCAST_FACE_WITH_SWEAT: 0.6,
    Emoji.WEARY_FACE: 0.6,
    Emoji.TIRED_FACE: 0.6,
    Emoji.YAWNING_FACE: 12.0,
    Emoji.FACE_WITH_STEAM_FROM_NOSE: 0.6,
    Emoji.ENRAGED_FACE: 0.6,
    Emoji.ANGRY_FACE: 0.6,
    Emoji.FACE_WITH_SYMBOLS_ON_MOUTH: 5.0,
    Emoji.SMILING_FACE_WITH_HORNS: 1.0,
    Emoji.ANGRY_FACE_WITH_HORNS: 0.6,
    Emoji.SKULL: 0.6,
    Emoji.SKULL_AND_CROSSBONES: 1.0,
    Emoji.PILE_OF_POO: 0.6,
    Emoji.CLOWN_FACE: 3.0,
    Emoji.OGRE: 0.6,
    Emoji.GOBLIN: 0.6,
    Emoji.GHOST: 0.6,
    Emoji.ALIEN: 0.6,
    Emoji.ALIEN_MONSTER: 0.6,
    Emoji.ROBOT: 1.0,
    Emoji.GRINNING_CAT: 0.6,
    Emoji.GRINNING_CAT_WITH_SMILING_EYES: 0.6,
    Emoji.CAT_WITH_TEARS_OF_JOY: 0.6,
    Emoji.SMILING_CAT_WITH_HEART_EYES: 0.6,
    Emoji.CAT_WITH_WRY_SMILE: 0.6,
    Emoji.KISSING_CAT: 0.6,
    Emoji.WEARY_CAT: 0.6,
    Emoji.CRYING_CAT: 0.6,
    Emoji.POUTING_CAT: 0.6,
    Emoji.SEE_NO_EVIL_MONKEY: 0.6,
    Emoji.HEAR_NO_EVIL_MONKEY: 0.6,
    Emoji.SPEAK_NO_EVIL_MONKEY: 0.6,
    Emoji.LOVE_LETTER: 0.6,
    Emoji.HEART_WITH_ARROW: 0.6,
    Emoji.HEART_WITH_RIBBON: 0.6,
    Emoji.SPARKLING_HEART: 0.6,
    Emoji.GROWING_HEART: 0.6,
    Emoji.BEATING_HEART: 0.6,
    Emoji.REVOLVING_HEARTS: 0.6,
    Emoji.TWO_HEARTS: 0.6,
    Emoji.HEART_DECORATION: 0.6,
    Emoji.HEART_EXCLAMATION: 1.0,
    Emoji.BROKEN_HEART: 0.6,
    Emoji.HEART_ON_FIRE: 13.1,
    Emoji.MENDING_HEART: 13.1,
    Emoji.RED_HEART: 0.6,
    Emoji.PINK_HEART: 15.0,
    Emoji.ORANGE_HEART: 5.0,
    Emoji.YELLOW_HEART: 0.6,
    Emoji.GREEN_HEART: 0.6,
    Emoji.BLUE_HEART: 0.6,
    Emoji.LIGHT_BLUE_HEART: 15.0,
    Emoji.PURPLE_HEART: 0.6,
    Emoji.BROWN_HEART: 12.0,
    Emoji.BLACK_HEART: 3.0,
    Emoji.GREY_HEART: 15.0,
    Emoji.WHITE_HEART: 12.0,
    Emoji.KISS_MARK: 0.6,
    Emoji.HUNDRED_POINTS: 0.6,
    Emoji.ANGER_SYMBOL: 0.6,
    Emoji.COLLISION: 0.6,
    Emoji.DIZZY: 0.6,
    Emoji.SWEAT_DROPLETS: 0.6,
    Emoji.DASHING_AWAY: 0.6,
    Emoji.HOLE: 0.7,
    Emoji.SPEECH_BALLOON: 0.6,
    Emoji.EYE_IN_SPEECH_BUBBLE: 2.0,
    Emoji.LEFT_SPEECH_BUBBLE: 2.0,
    Emoji.RIGHT_ANGER_BUBBLE: 0.7,
    Emoji.THOUGHT_BALLOON: 1.0,
    Emoji.ZZZ: 0.6,
    Emoji.WAVING_HAND: 0.6,
    Emoji.RAISED_BACK_OF_HAND: 3.0,
    Emoji.HAND_WITH_FINGERS_SPLAYED: 0.7,
    Emoji.RAISED_HAND: 0.6,
    Emoji.VULCAN_SALUTE: 1.0,
    Emoji.RIGHTWARDS_HAND: 14.0,
    Emoji.LEFTWARDS_HAND: 14.0,
    Emoji.PALM_DOWN_HAND: 14.0,
    Emoji.PALM_UP_HAND: 14.0,
    Emoji.LEFTWARDS_PUSHING_HAND: 15.0,
    Emoji.RIGHTWARDS_PUSHING_HAND: 15.0,
    Emoji.OK_HAND: 0.6,
    Emoji.PINCHED_FINGERS: 13.0,
    Emoji.PINCHING_HAND: 12.0,
    Emoji.VICTORY_HAND: 0.6,
    Emoji.CROSSED_FINGERS: 3.0,
    Emoji.HAND_WITH_INDEX_FINGER_AND_THUMB_CROSSED: 14.0,
    Emoji.LOVE_YOU_GESTURE: 5.0,
    Emoji.SIGN_OF_THE_HORNS: 1.0,
    Emoji.CALL_ME_HAND: 3.0,
    Emoji.BACKHAND_INDEX_POINTING_LEFT: 0.6,
    Emoji.BACKHAND_INDEX_POINTING_RIGHT: 0.6,
    Emoji.BACKHAND_INDEX_POINTING_UP: 0.6,
    Emoji.MIDDLE_FINGER: 1.0,
    Emoji.BACKHAND_INDEX_POINTING_DOWN: 0.6,
    Emoji.INDEX_POINTING_UP: 0.6,
    Emoji.INDEX_POINTING_AT_THE_VIEWER: 14.0,
    Emoji.THUMBS_UP: 0.6,
    Emoji.THUMBS_DOWN: 0.6,
    Emoji.RAISED_FIST: 0.6,
    Emoji.ONCOMING_FIST: 0.6,
    Emoji.LEFT_FACING_FIST: 3.0,
    Emoji.RIGHT_FACING_FIST: 3.0,
    Emoji.CLAPPING_HANDS: 0.6,
    Emoji.RAISING_HANDS: 0.6,
    Emoji.HEART_HANDS: 14.0,
    Emoji.OPEN_HANDS: 0.6,
    Emoji.PALMS_UP_TOGETHER: 5.0,
    Emoji.HANDSHAKE: 3.0,
    Emoji.FOLDED_HANDS: 0.6,
    Emoji.WRITING_HAND: 0.7,
    Emoji.NAIL_POLISH: 0.6,
    Emoji.SELFIE: 3.0,
    Emoji.FLEXED_BICEPS: 0.6,
    Emoji.MECHANICAL_ARM: 12.0,
    Emoji.MECHANICAL_LEG: 12.0,
    Emoji.LEG: 11.0,
    Emoji.FOOT: 11.0,
    Emoji.EAR: 0.6,
    Emoji.EAR_WITH_HEARING_AID: 12.0,
    Emoji.NOSE: 0.6,
    Emoji.BRAIN: 5.0,
    Emoji.ANATOMICAL_HEART: 13.0,
    Emoji.LUNGS: 13.0,
    Emoji.TOOTH: 11.0,
    Emoji.BONE: 11.0,
    Emoji.EYES: 0.6,
    Emoji.EYE: 0.7,
    Emoji.TONGUE: 0.6,
    Emoji.MOUTH: 0.6,
    Emoji.BITING_LIP: 14.0,
    Emoji.BABY: 0.6,
    Emoji.CHILD: 5.0,
    Emoji.BOY: 0.6,
    Emoji.GIRL: 0.6,
    Emoji.PERSON: 5.0,
    Emoji.PERSON_BLOND_HAIR: 0.6,
    Emoji.MAN: 0.6,
    Emoji.PERSON_BEARD: 5.0,
    Emoji.MAN_BEARD: 13.1,
    Emoji.WOMAN_BEARD: 13.1,
    Emoji.MAN_RED_HAIR: 11.0,
    Emoji.MAN_CURLY_HAIR: 11.0,
    Emoji.MAN_WHITE_HAIR: 11.0,
    Emoji.MAN_BALD: 11.0,
    Emoji.WOMAN: 0.6,
    Emoji.WOMAN_RED_HAIR: 11.0,
    Emoji.PERSON_RED_HAIR: 12.1,
    Emoji.WOMAN_CURLY_HAIR: 11.0,
    Emoji.PERSON_CURLY_HAIR: 12.1,
    Emoji.WOMAN_WHITE_HAIR: 11.0,
    Emoji.PERSON_WHITE_HAIR: 12.1,
    Emoji.WOMAN_BALD: 11.0,
    Emoji.PERSON_BALD: 12.1,
    Emoji.WOMAN_BLOND_HAIR: 4.0,
    Emoji.MAN_BLOND_HAIR: 4.0,
    Emoji.OLDER_PERSON: 5.0,
    Emoji.OLD_MAN: 0.6,
    Emoji.OLD_WOMAN: 0.6,
    Emoji.PERSON_FROWNING: 0.6,
    Emoji.MAN_FROWNING: 4.0,
    Emoji.WOMAN_FROWNING: 4.0,
    Emoji.PERSON_POUTING: 0.6,
    Emoji.MAN_POUTING: 4.0,
    Emoji.WOMAN_POUTING: 4.0,
    Emoji.PERSON_GESTURING_NO: 0.6,
    Emoji.MAN_GESTURING_NO: 4.0,
    Emoji.WOMAN_GESTURING_NO: 4.0,
    Emoji.PERSON_GESTURING_OK: 0.6,
    Emoji.MAN_GESTURING_OK: 4.0,
    Emoji.WOMAN_GESTURING_OK: 4.0,
    Emoji.PERSON_TIPPING_HAND: 0.6,
    Emoji.MAN_TIPPING_HAND: 4.0,
    Emoji.WOMAN_TIPPING_HAND: 4.0,
    Emoji.PERSON_RAISING_HAND: 0.6,
    Emoji.MAN_RAISING_HAND: 4.0,
    Emoji.WOMAN_RAISING_HAND: 4.0,
    Emoji.DEAF_PERSON: 12.0,
    Emoji.DEAF_MAN: 12.0,
    Emoji.DEAF_WOMAN: 12.0,
    Emoji.PERSON_BOWING: 0.6,
    Emoji.MAN_BOWING: 4.0,
    Emoji.WOMAN_BOWING: 4.0,
    Emoji.PERSON_FACEPALMING: 3.0,
    Emoji.MAN_FACEPALMING: 4.0,
    Emoji.WOMAN_FACEPALMING: 4.0,
    Emoji.PERSON_SHRUGGING: 3.0,
    Emoji.MAN_SHRUGGING: 4.0,
    Emoji.WOMAN_SHRUGGING: 4.0,
    Emoji.HEALTH_WORKER: 12.1,
    Emoji.MAN_HEALTH_WORKER: 4.0,
    Emoji.WOMAN_HEALTH_WORKER: 4.0,
    Emoji.STUDENT: 12.1,
    Emoji.MAN_STUDENT: 4.0,
    Emoji.WOMAN_STUDENT: 4.0,
    Emoji.TEACHER: 12.1,
    Emoji.MAN_TEACHER: 4.0,
    Emoji.WOMAN_TEACHER: 4.0,
    Emoji.JUDGE: 12.1,
    Emoji.MAN_JUDGE: 4.0,
    Emoji.WOMAN_JUDGE: 4.0,
    Emoji.FARMER: 12.1,
    Emoji.MAN_FARMER: 4.0,
    Emoji.WOMAN_FARMER: 4.0,
    Emoji.COOK: 12.1,
    Emoji.MAN_COOK: 4.0,
    Emoji.WOMAN_COOK: 4.0,
    Emoji.MECHANIC: 12.1,
    Emoji.MAN_MECHANIC: 4.0,
    Emoji.WOMAN_MECHANIC: 4.0,
    Emoji.FACTORY_WORKER: 12.1,
    Emoji.MAN_FACTORY_WORKER: 4.0,
    Emoji.WOMAN_FACTORY_WORKER: 4.0,
    Emoji.OFFICE_WORKER: 12.1,
    Emoji.MAN_OFFICE_WORKER: 4.0,
    Emoji.WOMAN_OFFICE_WORKER: 4.0,
    Emoji.SCIENTIST: 12.1,
    Emoji.MAN_SCIENTIST: 4.0,
    Emoji.WOMAN_SCIENTIST: 4.0,
    Emoji.TECHNOLOGIST: 12.1,
    Emoji.MAN_TECHNOLOGIST: 4.0,
    Emoji.WOMAN_TECHNOLOGIST: 4.0,
    Emoji.SINGER: 12.1,
    Emoji.MAN_SINGER: 4.0,
    Emoji.WOMAN_SINGER: 4.0,
    Emoji.ARTIST: 12.1,
    Emoji.MAN_ARTIST: 4.0,
    Emoji.WOMAN_ARTIST: 4.0,
    Emoji.PILOT: 12.1,
    Emoji.MAN_PILOT: 4.0,
    Emoji.WOMAN_PILOT: 4.0,
    Emoji.ASTRONAUT: 12.1,
    Emoji.MAN_ASTRONAUT: 4.0,
    Emoji.WOMAN_ASTRONAUT: 4.0,
    Emoji.FIREFIGHTER: 12.1,
    Emoji.MAN_FIREFIGHTER: 4.0,
    Emoji.WOMAN_FIREFIGHTER: 4.0,
    Emoji.POLICE_OFFICER: 0.6,
    Emoji.MAN_POLICE_OFFICER: 4.0,
    Emoji.WOMAN_POLICE_OFFICER: 4.0,
    Emoji.DETECTIVE: 0.7,
    Emoji.MAN_DETECTIVE: 4.0,
    Emoji.WOMAN_DETECTIVE: 4.0,
    Emoji.GUARD: 0.6,
    Emoji.MAN_GUARD: 4.0,
    Emoji.WOMAN_GUARD: 4.0,
    Emoji.NINJA: 13.0,
    Emoji.CONSTRUCTION_WORKER: 0.6,
    Emoji.MAN_CONSTRUCTION_WORKER: 4.0,
    Emoji.WOMAN_CONSTRUCTION_WORKER: 4.0,
    Emoji.PERSON_WITH_CROWN: 14.0,
    Emoji.PRINCE: 3.0,
    Emoji.PRINCESS: 0.6,
    Emoji.PERSON_WEARING_TURBAN: 0.6,
    Emoji.MAN_WEARING_TURBAN: 4.0,
    Emoji.WOMAN_WEARING_TURBAN: 4.0,
    Emoji.PERSON_WITH_SKULLCAP: 0.6,
    Emoji.WOMAN_WITH_HEADSCARF: 5.0,
    Emoji.PERSON_IN_TUXEDO: 3.0,
    Emoji.MAN_IN_TUXEDO: 13.0,
    Emoji.WOMAN_IN_TUXEDO: 13.0,
    Emoji.PERSON_WITH_VEIL: 0.6,
    Emoji.MAN_WITH_VEIL: 13.0,
    Emoji.WOMAN_WITH_VEIL: 13.0,
    Emoji.PREGNANT_WOMAN: 3.0,
    Emoji.PREGNANT_MAN: 14.0,
    Emoji.PREGNANT_PERSON: 14.0,
    Emoji.BREAST_FEEDING: 5.0,
    Emoji.WOMAN_FEEDING_BABY: 13.0,
    Emoji.MAN_FEEDING_BABY: 13.0,
    Emoji.PERSON_FEEDING_BABY: 13.0,
    Emoji.BABY_ANGEL: 0.6,
    Emoji.SANTA_CLAUS: 0.6,
    Emoji.MRS_CLAUS: 3.0,
    Emoji.MX_CLAUS: 13.0,
    Emoji.SUPERHERO: 11.0,
    Emoji.MAN_SUPERHERO: 11.0,
    Emoji.WOMAN_SUPERHERO: 11.0,
    Emoji.SUPERVILLAIN: 11.0,
    Emoji.MAN_SUPERVILLAIN: 11.0,
    Emoji.WOMAN_SUPERVILLAIN: 11.0,
    Emoji.MAGE: 5.0,
    Emoji.MAN_MAGE: 5.0,
    Emoji.WOMAN_MAGE: 5.0,
    Emoji.FAIRY: 5.0,
    Emoji.MAN_FAIRY: 5.0,
    Emoji.WOMAN_FAIRY: 5.0,
    Emoji.VAMPIRE: 5.0,
    Emoji.MAN_VAMPIRE: 5.0,
    Emoji.WOMAN_VAMPIRE: 5.0,
    Emoji.MERPERSON: 5.0,
    Emoji.MERMAN: 5.0,
    Emoji.MERMAID: 5.0,
    Emoji.ELF: 5.0,
    Emoji.MAN_ELF: 5.0,
    Emoji.WOMAN_ELF: 5.0,
    Emoji.GENIE: 5.0,
    Emoji.MAN_GENIE: 5.0,
    Emoji.WOMAN_GENIE: 5.0,
    Emoji.ZOMBIE: 5.0,
    Emoji.MAN_ZOMBIE: 5.0,
    Emoji.WOMAN_ZOMBIE: 5.0,
    Emoji.TROLL: 14.0,
    Emoji.PERSON_GETTING_MASSAGE: 0.6,
    Emoji.MAN_GETTING_MASSAGE: 4.0,
    Emoji.WOMAN_GETTING_MASSAGE: 4.0,
    Emoji.PERSON_GETTING_HAIRCUT: 0.6,
    Emoji.MAN_GETTING_HAIRCUT: 4.0,
    Emoji.WOMAN_GETTING_HAIRCUT: 4.0,
    Emoji.PERSON_WALKING: 0.6,
    Emoji.MAN_WALKING: 4.0,
    Emoji.WOMAN_WALKING: 4.0,
    Emoji.PERSON_WALKING_FACING_RIGHT: 15.1,
    Emoji.WOMAN_WALKING_FACING_RIGHT: 15.1,
    Emoji.MAN_WALKING_FACING_RIGHT: 15.1,
    Emoji.PERSON_STANDING: 12.0,
    Emoji.MAN_STANDING: 12.0,
    Emoji.WOMAN_STANDING: 12.0,
    Emoji.PERSON_KNEELING: 12.0,
    Emoji.MAN_KNEELING: 12.0,
    Emoji.WOMAN_KNEELING: 12.0,
    Emoji.PERSON_KNEELING_FACING_RIGHT: 15.1,
    Emoji.WOMAN_KNEELING_FACING_RIGHT: 15.1,
    Emoji.MAN_KNEELING_FACING_RIGHT: 15.1,
    Emoji.PERSON_WITH_WHITE_CANE: 12.1,
    Emoji.PERSON_WITH_WHITE_CANE_FACING_RIGHT: 15.1,
    Emoji.MAN_WITH_WHITE_CANE: 12.0,
    Emoji.MAN_WITH_WHITE_CANE_FACING_RIGHT: 15.1,
    Emoji.WOMAN_WITH_WHITE_CANE: 12.0,
    Emoji.WOMAN_WITH_WHITE_CANE_FACING_RIGHT: 15.1,
    Emoji.PERSON_IN_MOTORIZED_WHEELCHAIR: 12.1,
    Emoji.PERSON_IN_MOTORIZED_WHEELCHAIR_FACING_RIGHT: 15.1,
    Emoji.MAN_IN_MOTORIZED_WHEELCHAIR: 12.0,
    Emoji.MAN_IN_MOTORIZED_WHEELCHAIR_FACING_RIGHT: 15.1,
    Emoji.WOMAN_IN_MOTORIZED_WHEELCHAIR: 12.0,
    Emoji.WOMAN_IN_MOTORIZED_WHEELCHAIR_FACING_RIGHT: 15.1,
    Emoji.PERSON_IN_MANUAL_WHEELCHAIR: 12.1,
    Emoji.PERSON_IN_MANUAL_WHEELCHAIR_FACING_RIGHT: 15.1,
    Emoji.MAN_IN_MANUAL_WHEELCHAIR: 12.0,
    Emoji.MAN_IN_MANUAL_WHEELCHAIR_FACING_RIGHT: 15.1,
    Emoji.WOMAN_IN_MANUAL_WHEELCHAIR: 12.0,
    Emoji.WOMAN_IN_MANUAL_WHEELCHAIR_FACING_RIGHT: 15.1,
    Emoji.PERSON_RUNNING: 0.6,
    Emoji.MAN_RUNNING: 4.0,
    Emoji.WOMAN_RUNNING: 4.0,
    Emoji.PERSON_RUNNING_FACING_RIGHT: 15.1,
    Emoji.WOMAN_RUNNING_FACING_RIGHT: 15.1,
    Emoji.MAN_RUNNING_FACING_RIGHT: 15.1,
    Emoji.WOMAN_DANCING: 0.6,
    Emoji.MAN_DANCING: 3.0,
    Emoji.PERSON_IN_SUIT_LEVITATING: 0.7,
    Emoji.PEOPLE_WITH_BUNNY_EARS: 0.6,
    Emoji.MEN_WITH_BUNNY_EARS: 4.0,
    Emoji.WOMEN_WITH_BUNNY_EARS: 4.0,
    Emoji.PERSON_IN_STEAMY_ROOM: 5.0,
    Emoji.MAN_IN_STEAMY_ROOM: 5.0,
    Emoji.WOMAN_IN_STEAMY_ROOM: 5.0,
    Emoji.PERSON_CLIMBING: 5.0,
    Emoji.MAN_CLIMBING: 5.0,
    Emoji.WOMAN_CLIMBING: 5.0,
    Emoji.PERSON_FENCING: 3.0,
    Emoji.HORSE_RACING: 1.0,
    Emoji.SKIER: 0.7,
    Emoji.SNOWBOARDER: 0.6,
    Emoji.PERSON_GOLFING: 0.7,
    Emoji.MAN_GOLFING: 4.0,
    Emoji.WOMAN_GOLFING: 4.0,
    Emoji.PERSON_SURFING: 0.6,
    Emoji.MAN_SURFING: 4.0,
    Emoji.WOMAN_SURFING: 4.0,
    Emoji.PERSON_ROWING_BOAT: 1.0,
    Emoji.MAN_ROWING_BOAT: 4.0,
    Emoji.WOMAN_ROWING_BOAT: 4.0,
    Emoji.PERSON_SWIMMING: 0.6,
    Emoji.MAN_SWIMMING: 4.0,
    Emoji.WOMAN_SWIMMING: 4.0,
    Emoji.PERSON_BOUNCING_BALL: 0.7,
    Emoji.MAN_BOUNCING_BALL: 4.0,
    Emoji.WOMAN_BOUNCING_BALL: 4.0,
    Emoji.PERSON_LIFTING_WEIGHTS: 0.7,
    Emoji.MAN_LIFTING_WEIGHTS: 4.0,
    Emoji.WOMAN_LIFTING_WEIGHTS: 4.0,
    Emoji.PERSON_BIKING: 1.0,
    Emoji.MAN_BIKING: 4.0,
    Emoji.WOMAN_BIKING: 4.0,
    Emoji.PERSON_MOUNTAIN_BIKING: 1.0,
    Emoji.MAN_MOUNTAIN_BIKING: 4.0,
    Emoji.WOMAN_MOUNTAIN_BIKING: 4.0,
    Emoji.PERSON_CARTWHEELING: 3.0,
    Emoji.MAN_CARTWHEELING: 4.0,
    Emoji.WOMAN_CARTWHEELING: 4.0,
    Emoji.PEOPLE_WRESTLING: 3.0,
    Emoji.MEN_WRESTLING: 4.0,
    Emoji.WOMEN_WRESTLING: 4.0,
    Emoji.PERSON_PLAYING_WATER_POLO: 3.0,
    Emoji.MAN_PLAYING_WATER_POLO: 4.0,
    Emoji.WOMAN_PLAYING_WATER_POLO: 4.0,
    Emoji.PERSON_PLAYING_HANDBALL: 3.0,
    Emoji.MAN_PLAYING_HANDBALL: 4.0,
    Emoji.WOMAN_PLAYING_HANDBALL: 4.0,
    Emoji.PERSON_JUGGLING: 3.0,
    Emoji.MAN_JUGGLING: 4.0,
    Emoji.WOMAN_JUGGLING: 4.0,
    Emoji.PERSON_IN_LOTUS_POSITION: 5.0,
    Emoji.MAN_IN_LOTUS_POSITION: 5.0,
    Emoji.WOMAN_IN_LOTUS_POSITION: 5.0,
    Emoji.PERSON_TAKING_BATH: 0.6,
    Emoji.PERSON_IN_BED: 1.0,
    Emoji.PEOPLE_HOLDING_HANDS: 12.0,
    Emoji.WOMEN_HOLDING_HANDS: 1.0,
    Emoji.WOMAN_AND_MAN_HOLDING_HANDS: 0.6,
    Emoji.MEN_HOLDING_HANDS: 1.0,
    Emoji.KISS: 0.6,
    Emoji.KISS_WOMAN_MAN: 2.0,
    Emoji.KISS_MAN_MAN: 2.0,
    Emoji.KISS_WOMAN_WOMAN: 2.0,
    Emoji.COUPLE_WITH_HEART: 0.6,
    Emoji.COUPLE_WITH_HEART_WOMAN_MAN: 2.0,
    Emoji.COUPLE_WITH_HEART_MAN_MAN: 2.0,
    Emoji.COUPLE_WITH_HEART_WOMAN_WOMAN: 2.0,
    Emoji.FAMILY_MAN_WOMAN_BOY: 2.0,
    Emoji.FAMILY_MAN_WOMAN_GIRL: 2.0,
    Emoji.FAMILY_MAN_WOMAN_GIRL_BOY: 2.0,
    Emoji.FAMILY_MAN_WOMAN_BOY_BOY: 2.0,
    Emoji.FAMILY_MAN_WOMAN_GIRL_GIRL: 2.0,
    Emoji.FAMILY_MAN_MAN_BOY: 2.0,
    Emoji.FAMILY_MAN_MAN_GIRL: 2.0,
    Emoji.FAMILY_MAN_MAN_GIRL_BOY: 2.0,
    Emoji.FAMILY_MAN_MAN_BOY_BOY: 2.0,
    Emoji.FAMILY_MAN_MAN_GIRL_GIRL: 2.0,
    Emoji.FAMILY_WOMAN_WOMAN_BOY: 2.0,
    Emoji.FAMILY_WOMAN_WOMAN_GIRL: 2.0,
    Emoji.FAMILY_WOMAN_WOMAN_GIRL_BOY: 2.0,
    Emoji.FAMILY_WOMAN_WOMAN_BOY_BOY: 2.0,
    Emoji.FAMILY_WOMAN_WOMAN_GIRL_GIRL: 2.0,
    Emoji.FAMILY_MAN_BOY: 4.0,
    Emoji.FAMILY_MAN_BOY_BOY: 4.0,
    Emoji.FAMILY_MAN_GIRL: 4.0,
    Emoji.FAMILY_MAN_GIRL_BOY: 4.0,
    Emoji.FAMILY_MAN_GIRL_GIRL: 4.0,
    Emoji.FAMILY_WOMAN_BOY: 4.0,
    Emoji.FAMILY_WOMAN_BOY_BOY: 4.0,
    Emoji.FAMILY_WOMAN_GIRL: 4.0,
    Emoji.FAMILY_WOMAN_GIRL_BOY: 4.0,
    Emoji.FAMILY_WOMAN_GIRL_GIRL: 4.0,
    Emoji.SPEAKING_HEAD: 0.7,
    Emoji.BUST_IN_SILHOUETTE: 0.6,
    Emoji.BUSTS_IN_SILHOUETTE: 1.0,
    Emoji.PEOPLE_HUGGING: 13.0,
    Emoji.FAMILY: 0.6,
    Emoji.FAMILY_ADULT_ADULT_CHILD: 15.1,
    Emoji.FAMILY_ADULT_ADULT_CHILD_CHILD: 15.1,
    Emoji.FAMILY_ADULT_CHILD: 15.1,
    Emoji.FAMILY_ADULT_CHILD_CHILD: 15.1,
    Emoji.FOOTPRINTS: 0.6,
    Emoji.MONKEY_FACE: 0.6,
    Emoji.MONKEY: 0.6,
    Emoji.GORILLA: 3.0,
    Emoji.ORANGUTAN: 12.0,
    Emoji.DOG_FACE: 0.6,
    Emoji.DOG: 0.7,
    Emoji.GUIDE_DOG: 12.0,
    Emoji.SERVICE_DOG: 12.0,
    Emoji.POODLE: 0.6,
    Emoji.WOLF: 0.6,
    Emoji.FOX: 3.0,
    Emoji.RACCOON: 11.0,
    Emoji.CAT_FACE: 0.6,
    Emoji.CAT: 0.7,
    Emoji.BLACK_CAT: 13.0,
    Emoji.LION: 1.0,
    Emoji.TIGER_FACE: 0.6,
    Emoji.TIGER: 1.0,
    Emoji.LEOPARD: 1.0,
    Emoji.HORSE_FACE: 0.6,
    Emoji.MOOSE: 15.0,
    Emoji.DONKEY: 15.0,
    Emoji.HORSE: 0.6,
    Emoji.UNICORN: 1.0,
    Emoji.ZEBRA: 5.0,
    Emoji.DEER: 3.0,
    Emoji.BISON: 13.0,
    Emoji.COW_FACE: 0.6,
    Emoji.OX: 1.0,
    Emoji.WATER_BUFFALO: 1.0,
    Emoji.COW: 1.0,
    Emoji.PIG_FACE: 0.6,
    Emoji.PIG: 1.0,
    Emoji.BOAR: 0.6,
    Emoji.PIG_NOSE: 0.6,
    Emoji.RAM: 1.0,
    Emoji.EWE: 0.6,
    Emoji.GOAT: 1.0,
    Emoji.CAMEL: 1.0,
    Emoji.TWO_HUMP_CAMEL: 0.6,
    Emoji.LLAMA: 11.0,
    Emoji.GIRAFFE: 5.0,
    Emoji.ELEPHANT: 0.6,
    Emoji.MAMMOTH: 13.0,
    Emoji.RHINOCEROS: 3.0,
    Emoji.HIPPOPOTAMUS: 11.0,
    Emoji.MOUSE_FACE: 0.6,
    Emoji.MOUSE: 1.0,
    Emoji.RAT: 1.0,
    Emoji.HAMSTER: 0.6,
    Emoji.RABBIT_FACE: 0.6,
    Emoji.RABBIT: 1.0,
    Emoji.CHIPMUNK: 0.7,
    Emoji.BEAVER: 13.0,
    Emoji.HEDGEHOG: 5.0,
    Emoji.BAT: 3.0,
    Emoji.BEAR: 0.6,
    Emoji.POLAR_BEAR: 13.0,
    Emoji.KOALA: 0.6,
    Emoji.PANDA: 0.6,
    Emoji.SLOTH: 12.0,
    Emoji.OTTER: 12.0,
    Emoji.SKUNK: 12.0,
    Emoji.KANGAROO: 11.0,
    Emoji.BADGER: 11.0,
    Emoji.PAW_PRINTS: 0.6,
    Emoji.TURKEY: 1.0,
    Emoji.CHICKEN: 0.6,
    Emoji.ROOSTER: 1.0,
    Emoji.HATCHING_CHICK: 0.6,
    Emoji.BABY_CHICK: 0.6,
    Emoji.FRONT_FACING_BABY_CHICK: 0.6,
    Emoji.BIRD: 0.6,
    Emoji.PENGUIN: 0.6,
    Emoji.DOVE: 0.7,
    Emoji.EAGLE: 3.0,
    Emoji.DUCK: 3.0,
    Emoji.SWAN: 11.0,
    Emoji.OWL: 3.0,
    Emoji.DODO: 13.0,
    Emoji.FEATHER: 13.0,
    Emoji.FLAMINGO: 12.0,
    Emoji.PEACOCK: 11.0,
    Emoji.PARROT: 11.0,
    Emoji.WING: 15.0,
    Emoji.BLACK_BIRD: 15.0,
    Emoji.GOOSE: 15.0,
    Emoji.PHOENIX: 15.1,
    Emoji.FROG: 0.6,
    Emoji.CROCODILE: 1.0,
    Emoji.TURTLE: 0.6,
    Emoji.LIZARD: 3.0,
    Emoji.SNAKE: 0.6,
    Emoji.DRAGON_FACE: 0.6,
    Emoji.DRAGON: 1.0,
    Emoji.SAUROPOD: 5.0,
    Emoji.T_REX: 5.0,
    Emoji.SPOUTING_WHALE: 0.6,
    Emoji.WHALE: 1.0,
    Emoji.DOLPHIN: 0.6,
    Emoji.SEAL: 13.0,
    Emoji.FISH: 0.6,
    Emoji.TROPICAL_FISH: 0.6,
    Emoji.BLOWFISH: 0.6,
    Emoji.SHARK: 3.0,
    Emoji.OCTOPUS: 0.6,
    Emoji.SPIRAL_SHELL: 0.6,
    Emoji.CORAL: 14.0,
    Emoji.JELLYFISH: 15.0,
    Emoji.SNAIL: 0.6,
    Emoji.BUTTERFLY: 3.0,
    Emoji.BUG: 0.6,
    Emoji.ANT: 0.6,
    Emoji.HONEYBEE: 0.6,
    Emoji.BEETLE: 13.0,
    Emoji.LADY_BEETLE: 0.6,
    Emoji.CRICKET: 5.0,
    Emoji.COCKROACH: 13.0,
    Emoji.SPIDER: 0.7,
    Emoji.SPIDER_WEB: 0.7,
    Emoji.SCORPION: 1.0,
    Emoji.MOSQUITO: 11.0,
    Emoji.FLY: 13.0,
    Emoji.WORM: 13.0,
    Emoji.MICROBE: 11.0,
    Emoji.BOUQUET: 0.6,
    Emoji.CHERRY_BLOSSOM: 0.6,
    Emoji.WHITE_FLOWER: 0.6,
    Emoji.LOTUS: 14.0,
    Emoji.ROSETTE: 0.7,
    Emoji.ROSE: 0.6,
    Emoji.WILTED_FLOWER: 3.0,
    Emoji.HIBISCUS: 0.6,
    Emoji.SUNFLOWER: 0.6,
    Emoji.BLOSSOM: 0.6,
    Emoji.TULIP: 0.6,
    Emoji.HYACINTH: 15.0,
    Emoji.SEEDLING: 0.6,
    Emoji.POTTED_PLANT: 13.0,
    Emoji.EVERGREEN_TREE: 1.0,
    Emoji.DECIDUOUS_TREE: 1.0,
    Emoji.PALM_TREE: 0.6,
    Emoji.CACTUS: 0.6,
    Emoji.SHEAF_OF_RICE: 0.6,
    Emoji.HERB: 0.6,
    Emoji.SHAMROCK: 1.0,
    Emoji.FOUR_LEAF_CLOVER: 0.6,
    Emoji.MAPLE_LEAF: 0.6,
    Emoji.FALLEN_LEAF: 0.6,
    Emoji.LEAF_FLUTTERING_IN_WIND: 0.6,
    Emoji.EMPTY_NEST: 14.0,
    Emoji.NEST_WITH_EGGS: 14.0,
    Emoji.MUSHROOM: 0.6,
    Emoji.GRAPES: 0.6,
    Emoji.MELON: 0.6,
    Emoji.WATERMELON: 0.6,
    Emoji.TANGERINE: 0.6,
    Emoji.LEMON: 1.0,
    Emoji.LIME: 15.1,
    Emoji.BANANA: 0.6,
    Emoji.PINEAPPLE: 0.6,
    Emoji.MANGO: 11.0,
    Emoji.RED_APPLE: 0.6,
    Emoji.GREEN_APPLE: 0.6,
    Emoji.PEAR: 1.0,
    Emoji.PEACH: 0.6,
    Emoji.CHERRIES: 0.6,
    Emoji.STRAWBERRY: 0.6,
    Emoji.BLUEBERRIES: 13.0,
    Emoji.KIWI_FRUIT: 3.0,
    Emoji.TOMATO: 0.6,
    Emoji.OLIVE: 13.0,
    Emoji.COCONUT: 5.0,
    Emoji.AVOCADO: 3.0,
    Emoji.EGGPLANT: 0.6,
    Emoji.POTATO: 3.0,
    Emoji.CARROT: 3.0,
    Emoji.EAR_OF_CORN: 0.6,
    Emoji.HOT_PEPPER: 0.7,
    Emoji.BELL_PEPPER: 13.0,
    Emoji.CUCUMBER: 3.0,
    Emoji.LEAFY_GREEN: 11.0,
    Emoji.BROCCOLI: 5.0,
    Emoji.GARLIC: 12.0,
    Emoji.ONION: 12.0,
    Emoji.PEANUTS: 3.0,
    Emoji.BEANS: 14.0,
    Emoji.CHESTNUT: 0.6,
    Emoji.GINGER_ROOT: 15.0,
    Emoji.PEA_POD: 15.0,
    Emoji.BROWN_MUSHROOM: 15.1,
    Emoji.BREAD: 0.6,
    Emoji.CROISSANT: 3.0,
    Emoji.BAGUETTE_BREAD: 3.0,
    Emoji.FLATBREAD: 13.0,
    Emoji.PRETZEL: 5.0,
    Emoji.BAGEL: 11.0,
    Emoji.PANCAKES: 3.0,
    Emoji.WAFFLE: 12.0,
    Emoji.CHEESE_WEDGE: 1.0,
    Emoji.MEAT_ON_BONE: 0.6,
    Emoji.POULTRY_LEG: 0.6,
    Emoji.CUT_OF_MEAT: 5.0,
    Emoji.BACON: 3.0,
    Emoji.HAMBURGER: 0.6,
    Emoji.FRENCH_FRIES: 0.6,
    Emoji.PIZZA: 0.6,
    Emoji.HOT_DOG: 1.0,
    Emoji.SANDWICH: 5.0,
    Emoji.TACO: 1.0,
    Emoji.BURRITO: 1.0,
    Emoji.TAMALE: 13.0,
    Emoji.STUFFED_FLATBREAD: 3.0,
    Emoji.FALAFEL: 12.0,
    Emoji.EGG: 3.0,
    Emoji.COOKING: 0.6,
    Emoji.SHALLOW_PAN_OF_FOOD: 3.0,
    Emoji.POT_OF_FOOD: 0.6,
    Emoji.FONDUE: 13.0,
    Emoji.BOWL_WITH_SPOON: 5.0,
    Emoji.GREEN_SALAD: 3.0,
    Emoji.POPCORN: 1.0,
    Emoji.BUTTER: 12.0,
    Emoji.SALT: 11.0,
    Emoji.CANNED_FOOD: 5.0,
    Emoji.BENTO_BOX: 0.6,
    Emoji.RICE_CRACKER: 0.6,
    Emoji.RICE_BALL: 0.6,
    Emoji.COOKED_RICE: 0.6,
    Emoji.CURRY_RICE: 0.6,
    Emoji.STEAMING_BOWL: 0.6,
    Emoji.SPAGHETTI: 0.6,
    Emoji.ROASTED_SWEET_POTATO: 0.6,
    Emoji.ODEN: 0.6,
    Emoji.SUSHI: 0.6,
    Emoji.FRIED_SHRIMP: 0.6,
    Emoji.FISH_CAKE_WITH_SWIRL: 0.6,
    Emoji.MOON_CAKE: 11.0,
    Emoji.DANGO: 0.6,
    Emoji.DUMPLING: 5.0,
    Emoji.FORTUNE_COOKIE: 5.0,
    Emoji.TAKEOUT_BOX: 5.0,
    Emoji.CRAB: 1.0,
    Emoji.LOBSTER: 11.0,
    Emoji.SHRIMP: 3.0,
    Emoji.SQUID: 3.0,
    Emoji.OYSTER: 12.0,
    Emoji.SOFT_ICE_CREAM: 0.6,
    Emoji.SHAVED_ICE: 0.6,
    Emoji.ICE_CREAM: 0.6,
    Emoji.DOUGHNUT: 0.6,
    Emoji.COOKIE: 0.6,
    Emoji.BIRTHDAY_CAKE: 0.6,
    Emoji.SHORTCAKE: 0.6,
    Emoji.CUPCAKE: 11.0,
    Emoji.PIE: 5.0,
    Emoji.CHOCOLATE_BAR: 0.6,
    Emoji.CANDY: 0.6,
    Emoji.LOLLIPOP: 0.6,
    Emoji.CUSTARD: 0.6,
    Emoji.HONEY_POT: 0.6,
    Emoji.BABY_BOTTLE: 1.0,
    Emoji.GLASS_OF_MILK: 3.0,
    Emoji.HOT_BEVERAGE: 0.6,
    Emoji.TEAPOT: 13.0,
    Emoji.TEACUP_WITHOUT_HANDLE: 0.6,
    Emoji.SAKE: 0.6,
    Emoji.BOTTLE_WITH_POPPING_CORK: 1.0,
    Emoji.WINE_GLASS: 0.6,
    Emoji.COCKTAIL_GLASS: 0.6,
    Emoji.TROPICAL_DRINK: 0.6,
    Emoji.BEER_MUG: 0.6,
    Emoji.CLINKING_BEER_MUGS: 0.6,
    Emoji.CLINKING_GLASSES: 3.0,
    Emoji.TUMBLER_GLASS: 3.0,
    Emoji.POURING_LIQUID: 14.0,
    Emoji.CUP_WITH_STRAW: 5.0,
    Emoji.BUBBLE_TEA: 13.0,
    Emoji.BEVERAGE_BOX: 12.0,
    Emoji.MATE: 12.0,
    Emoji.ICE: 12.0,
    Emoji.CHOPSTICKS: 5.0,
    Emoji.FORK_AND_KNIFE_WITH_PLATE: 0.7,
    Emoji.FORK_AND_KNIFE: 0.6,
    Emoji.SPOON: 3.0,
    Emoji.KITCHEN_KNIFE: 0.6,
    Emoji.JAR: 14.0,
    Emoji.AMPHORA: 1.0,
    Emoji.GLOBE_SHOWING_EUROPE_AFRICA: 0.7,
    Emoji.GLOBE_SHOWING_AMERICAS: 0.7,
    Emoji.GLOBE_SHOWING_ASIA_AUSTRALIA: 0.6,
    Emoji.GLOBE_WITH_MERIDIANS: 1.0,
    Emoji.WORLD_MAP: 0.7,
    Emoji.MAP_OF_JAPAN: 0.6,
    Emoji.COMPASS: 11.0,
    Emoji.SNOW_CAPPED_MOUNTAIN: 0.7,
    Emoji.MOUNTAIN: 0.7,
    Emoji.VOLCANO: 0.6,
    Emoji.MOUNT_FUJI: 0.6,
    Emoji.CAMPING: 0.7,
    Emoji.BEACH_WITH_UMBRELLA: 0.7,
    Emoji.DESERT: 0.7,
    Emoji.DESERT_ISLAND: 0.7,
    Emoji.NATIONAL_PARK: 0.7,
    Emoji.STADIUM: 0.7,
    Emoji.CLASSICAL_BUILDING: 0.7,
    Emoji.BUILDING_CONSTRUCTION: 0.7,
    Emoji.BRICK: 11.0,
    Emoji.ROCK: 13.0,
    Emoji.WOOD: 13.0,
    Emoji.HUT: 13.0,
    Emoji.HOUSES: 0.7,
    Emoji.DERELICT_HOUSE: 0.7,
    Emoji.HOUSE: 0.6,
    Emoji.HOUSE_WITH_GARDEN: 0.6,
    Emoji.OFFICE_BUILDING: 0.6,
    Emoji.JAPANESE_POST_OFFICE: 0.6,
    Emoji.POST_OFFICE: 1.0,
    Emoji.HOSPITAL: 0.6,
    Emoji.BANK: 0.6,
    Emoji.HOTEL: 0.6,
    Emoji.LOVE_HOTEL: 0.6,
    Emoji.CONVENIENCE_STORE: 0.6,
    Emoji.SCHOOL: 0.6,
    Emoji.DEPARTMENT_STORE: 0.6,
    Emoji.FACTORY: 0.6,
    Emoji.JAPANESE_CASTLE: 0.6,
    Emoji.CASTLE: 0.6,
    Emoji.WEDDING: 0.6,
    Emoji.TOKYO_TOWER: 0.6,
    Emoji.STATUE_OF_LIBERTY: 0.6,
    Emoji.CHURCH: 0.6,
    Emoji.MOSQUE: 1.0,
    Emoji.HINDU_TEMPLE: 12.0,
    Emoji.SYNAGOGUE: 1.0,
    Emoji.SHINTO_SHRINE: 0.7,
    Emoji.KAABA: 1.0,
    Emoji.FOUNTAIN: 0.6,
    Emoji.TENT: 0.6,
    Emoji.FOGGY: 0.6,
    Emoji.NIGHT_WITH_STARS: 0.6,
    Emoji.CITYSCAPE: 0.7,
    Emoji.SUNRISE_OVER_MOUNTAINS: 0.6,
    Emoji.SUNRISE: 0.6,
    Emoji.CITYSCAPE_AT_DUSK: 0.6,
    Emoji.SUNSET: 0.6,
    Emoji.BRIDGE_AT_NIGHT: 0.6,
    Emoji.HOT_SPRINGS: 0.6,
    Emoji.CAROUSEL_HORSE: 0.6,
    Emoji.PLAYGROUND_SLIDE: 14.0,
    Emoji.FERRIS_WHEEL: 0.6,
    Emoji.ROLLER_COASTER: 0.6,
    Emoji.BARBER_POLE: 0.6,
    Emoji.CIRCUS_TENT: 0.6,
    Emoji.LOCOMOTIVE: 1.0,
    Emoji.RAILWAY_CAR: 0.6,
    Emoji.HIGH_SPEED_TRAIN: 0.6,
    Emoji.BULLET_TRAIN: 0.6,
    Emoji.TRAIN: 1.0,
    Emoji.METRO: 0.6,
    Emoji.LIGHT_RAIL: 1.0,
    Emoji.STATION: 0.6,
    Emoji.TRAM: 1.0,
    Emoji.MONORAIL: 1.0,
    Emoji.MOUNTAIN_RAILWAY: 1.0,
    Emoji.TRAM_CAR: 1.0,
    Emoji.BUS: 0.6,
    Emoji.ONCOMING_BUS: 0.7,
    Emoji.TROLLEYBUS: 1.0,
    Emoji.MINIBUS: 1.0,
    Emoji.AMBULANCE: 0.6,
    Emoji.FIRE_ENGINE: 0.6,
    Emoji.POLICE_CAR: 0.6,
    Emoji.ONCOMING_POLICE_CAR: 0.7,
    Emoji.TAXI: 0.6,
    Emoji.ONCOMING_TAXI: 1.0,
    Emoji.AUTOMOBILE: 0.6,
    Emoji.ONCOMING_AUTOMOBILE: 0.7,
    Emoji.SPORT_UTILITY_VEHICLE: 0.6,
    Emoji.PICKUP_TRUCK: 13.0,
    Emoji.DELIVERY_TRUCK: 0.6,
    Emoji.ARTICULATED_LORRY: 1.0,
    Emoji.TRACTOR: 1.0,
    Emoji.RACING_CAR: 0.7,
    Emoji.MOTORCYCLE: 0.7,
    Emoji.MOTOR_SCOOTER: 3.0,
    Emoji.MANUAL_WHEELCHAIR: 12.0,
    Emoji.MOTORIZED_WHEELCHAIR: 12.0,
    Emoji.AUTO_RICKSHAW: 12.0,
    Emoji.BICYCLE: 0.6,
    Emoji.KICK_SCOOTER: 3.0,
    Emoji.SKATEBOARD: 11.0,
    Emoji.ROLLER_SKATE: 13.0,
    Emoji.BUS_STOP: 0.6,
    Emoji.MOTORWAY: 0.7,
    Emoji.RAILWAY_TRACK: 0.7,
    Emoji.OIL_DRUM: 0.7,
    Emoji.FUEL_PUMP: 0.6,
    Emoji.WHEEL: 14.0,
    Emoji.POLICE_CAR_LIGHT: 0.6,
    Emoji.HORIZONTAL_TRAFFIC_LIGHT: 0.6,
    Emoji.VERTICAL_TRAFFIC_LIGHT: 1.0,
    Emoji.STOP_SIGN: 3.0,
    Emoji.CONSTRUCTION: 0.6,
    Emoji.ANCHOR: 0.6,
    Emoji.RING_BUOY: 14.0,
    Emoji.SAILBOAT: 0.6,
    Emoji.CANOE: 3.0,
    Emoji.SPEEDBOAT: 0.6,
    Emoji.PASSENGER_SHIP: 0.7,
    Emoji.FERRY: 0.7,
    Emoji.MOTOR_BOAT: 0.7,
    Emoji.SHIP: 0.6,
    Emoji.AIRPLANE: 0.6,
    Emoji.SMALL_AIRPLANE: 0.7,
    Emoji.AIRPLANE_DEPARTURE: 1.0,
    Emoji.AIRPLANE_ARRIVAL: 1.0,
    Emoji.PARACHUTE: 12.0,
    Emoji.SEAT: 0.6,
    Emoji.HELICOPTER: 1.0,
    Emoji.SUSPENSION_RAILWAY: 1.0,
    Emoji.MOUNTAIN_CABLEWAY: 1.0,
    Emoji.AERIAL_TRAMWAY: 1.0,
    Emoji.SATELLITE: 0.7,
    Emoji.ROCKET: 0.6,
    Emoji.FLYING_SAUCER: 5.0,
    Emoji.BELLHOP_BELL: 0.7,
    Emoji.LUGGAGE: 11.0,
    Emoji.HOURGLASS_DONE: 0.6,
    Emoji.HOURGLASS_NOT_DONE: 0.6,
    Emoji.WATCH: 0.6,
    Emoji.ALARM_CLOCK: 0.6,
    Emoji.STOPWATCH: 1.0,
    Emoji.TIMER_CLOCK: 1.0,
    Emoji.MANTELPIECE_CLOCK: 0.7,
    Emoji.TWELVE_OCLOCK: 0.6,
    Emoji.TWELVE_THIRTY: 0.7,
    Emoji.ONE_OCLOCK: 0.6,
    Emoji.ONE_THIRTY: 0.7,
    Emoji.TWO_OCLOCK: 0.6,
    Emoji.TWO_THIRTY: 0.7,
    Emoji.THREE_OCLOCK: 0.6,
    Emoji.THREE_THIRTY: 0.7,
    Emoji.FOUR_OCLOCK: 0.6,
    Emoji.FOUR_THIRTY: 0.7,
    Emoji.FIVE_OCLOCK: 0.6,
    Emoji.FIVE_THIRTY: 0.7,
    Emoji.SIX_OCLOCK: 0.6,
    Emoji.SIX_THIRTY: 0.7,
    Emoji.SEVEN_OCLOCK: 0.6,
    Emoji.SEVEN_THIRTY: 0.7,
    Emoji.EIGHT_OCLOCK: 0.6,
    Emoji.EIGHT_THIRTY: 0.7,
    Emoji.NINE_OCLOCK: 0.6,
    Emoji.NINE_THIRTY: 0.7,
    Emoji.TEN_OCLOCK: 0.6,
    Emoji.TEN_THIRTY: 0.7,
    Emoji.ELEVEN_OCLOCK: 0.6,
    Emoji.ELEVEN_THIRTY: 0.7,
    Emoji.NEW_MOON: 0.6,
    Emoji.WAXING_CRESCENT_MOON: 1.0,
    Emoji.FIRST_QUARTER_MOON: 0.6,
    Emoji.WAXING_GIBBOUS_MOON: 0.6,
    Emoji.FULL_MOON: 0.6,
    Emoji.WANING_GIBBOUS_MOON: 1.0,
    Emoji.LAST_QUARTER_MOON: 1.0,
    Emoji.WANING_CRESCENT_MOON: 1.0,
    Emoji.CRESCENT_MOON: 0.6,
    Emoji.NEW_MOON_FACE: 1.0,
    Emoji.FIRST_QUARTER_MOON_FACE: 0.6,
    Emoji.LAST_QUARTER_MOON_FACE: 0.7,
    Emoji.THERMOMETER: 0.7,
    Emoji.SUN: 0.6,
    Emoji.FULL_MOON_FACE: 1.0,
    Emoji.SUN_WITH_FACE: 1.0,
    Emoji.RINGED_PLANET: 12.0,
    Emoji.STAR: 0.6,
    Emoji.GLOWING_STAR: 0.6,
    Emoji.SHOOTING_STAR: 0.6,
    Emoji.MILKY_WAY: 0.6,
    Emoji.CLOUD: 0.6,
    Emoji.SUN_BEHIND_CLOUD: 0.6,
    Emoji.CLOUD_WITH_LIGHTNING_AND_RAIN: 0.7,
    Emoji.SUN_BEHIND_SMALL_CLOUD: 0.7,
    Emoji.SUN_BEHIND_LARGE_CLOUD: 0.7,
    Emoji.SUN_BEHIND_RAIN_CLOUD: 0.7,
    Emoji.CLOUD_WITH_RAIN: 0.7,
    Emoji.CLOUD_WITH_SNOW: 0.7,
    Emoji.CLOUD_WITH_LIGHTNING: 0.7,
    Emoji.TORNADO: 0.7,
    Emoji.FOG: 0.7,
    Emoji.WIND_FACE: 0.7,
    Emoji.CYCLONE: 0.6,
    Emoji.RAINBOW: 0.6,
    Emoji.CLOSED_UMBRELLA: 0.6,
    Emoji.UMBRELLA: 0.7,
    Emoji.UMBRELLA_WITH_RAIN_DROPS: 0.6,
    Emoji.UMBRELLA_ON_GROUND: 0.7,
    Emoji.HIGH_VOLTAGE: 0.6,
    Emoji.SNOWFLAKE: 0.6,
    Emoji.SNOWMAN: 0.7,
    Emoji.SNOWMAN_WITHOUT_SNOW: 0.6,
    Emoji.COMET: 1.0,
    Emoji.FIRE: 0.6,
    Emoji.DROPLET: 0.6,
    Emoji.WATER_WAVE: 0.6,
    Emoji.JACK_O_LANTERN: 0.6,
    Emoji.CHRISTMAS_TREE: 0.6,
    Emoji.FIREWORKS: 0.6,
    Emoji.SPARKLER: 0.6,
    Emoji.FIRECRACKER: 11.0,
    Emoji.SPARKLES: 0.6,
    Emoji.BALLOON: 0.6,
    Emoji.PARTY_POPPER: 0.6,
    Emoji.CONFETTI_BALL: 0.6,
    Emoji.TANABATA_TREE: 0.6,
    Emoji.PINE_DECORATION: 0.6,
    Emoji.JAPANESE_DOLLS: 0.6,
    Emoji.CARP_STREAMER: 0.6,
    Emoji.WIND_CHIME: 0.6,
    Emoji.MOON_VIEWING_CEREMONY: 0.6,
    Emoji.RED_ENVELOPE: 11.0,
    Emoji.RIBBON: 0.6,
    Emoji.WRAPPED_GIFT: 0.6,
    Emoji.REMINDER_RIBBON: 0.7,
    Emoji.ADMISSION_TICKETS: 0.7,
    Emoji.TICKET: 0.6,
    Emoji.MILITARY_MEDAL: 0.7,
    Emoji.TROPHY: 0.6,
    Emoji.SPORTS_MEDAL: 1.0,
    Emoji.FIRST_PLACE_MEDAL: 3.0,
    Emoji.SECOND_PLACE_MEDAL: 3.0,
    Emoji.THIRD_PLACE_MEDAL: 3.0,
    Emoji.SOCCER_BALL: 0.6,
    Emoji.BASEBALL: 0.6,
    Emoji.SOFTBALL: 11.0,
    Emoji.BASKETBALL: 0.6,
    Emoji.VOLLEYBALL: 1.0,
    Emoji.AMERICAN_FOOTBALL: 0.6,
    Emoji.RUGBY_FOOTBALL: 1.0,
    Emoji.TENNIS: 0.6,
    Emoji.FLYING_DISC: 11.0,
    Emoji.BOWLING: 0.6,
    Emoji.CRICKET_GAME: 1.0,
    Emoji.FIELD_HOCKEY: 1.0,
    Emoji.ICE_HOCKEY: 1.0,
    Emoji.LACROSSE: 11.0,
    Emoji.PING_PONG: 1.0,
    Emoji.BADMINTON: 1.0,
    Emoji.BOXING_GLOVE: 3.0,
    Emoji.MARTIAL_ARTS_UNIFORM: 3.0,
    Emoji.GOAL_NET: 3.0,
    Emoji.FLAG_IN_HOLE: 0.6,
    Emoji.ICE_SKATE: 0.7,
    Emoji.FISHING_POLE: 0.6,
    Emoji.DIVING_MASK: 12.0,
    Emoji.RUNNING_SHIRT: 0.6,
    Emoji.SKIS: 0.6,
    Emoji.SLED: 5.0,
    Emoji.CURLING_STONE: 5.0,
    Emoji.BULLSEYE: 0.6,
    Emoji.YO_YO: 12.0,
    Emoji.KITE: 12.0,
    Emoji.WATER_PISTOL: 0.6,
    Emoji.POOL_8_BALL: 0.6,
    Emoji.CRYSTAL_BALL: 0.6,
    Emoji.MAGIC_WAND: 13.0,
    Emoji.VIDEO_GAME: 0.6,
    Emoji.JOYSTICK: 0.7,
    Emoji.SLOT_MACHINE: 0.6,
    Emoji.GAME_DIE: 0.6,
    Emoji.PUZZLE_PIECE: 11.0,
    Emoji.TEDDY_BEAR: 11.0,
    Emoji.PINATA: 13.0,
    Emoji.MIRROR_BALL: 14.0,
    Emoji.NESTING_DOLLS: 13.0,
    Emoji.SPADE_SUIT: 0.6,
    Emoji.HEART_SUIT: 0.6,
    Emoji.DIAMOND_SUIT: 0.6,
    Emoji.CLUB_SUIT: 0.6,
    Emoji.CHESS_PAWN: 11.0,
    Emoji.JOKER: 0.6,
    Emoji.MAHJONG_RED_DRAGON: 0.6,
    Emoji.FLOWER_PLAYING_CARDS: 0.6,
    Emoji.PERFORMING_ARTS: 0.6,
    Emoji.FRAMED_PICTURE: 0.7,
    Emoji.ARTIST_PALETTE: 0.6,
    Emoji.THREAD: 11.0,
    Emoji.SEWING_NEEDLE: 13.0,
    Emoji.YARN: 11.0,
    Emoji.KNOT: 13.0,
    Emoji.GLASSES: 0.6,
    Emoji.SUNGLASSES: 0.7,
    Emoji.GOGGLES: 11.0,
    Emoji.LAB_COAT: 11.0,
    Emoji.SAFETY_VEST: 12.0,
    Emoji.NECKTIE: 0.6,
    Emoji.T_SHIRT: 0.6,
    Emoji.JEANS: 0.6,
    Emoji.SCARF: 5.0,
    Emoji.GLOVES: 5.0,
    Emoji.COAT: 5.0,
    Emoji.SOCKS: 5.0,
    Emoji.DRESS: 0.6,
    Emoji.KIMONO: 0.6,
    Emoji.SARI: 12.0,
    Emoji.ONE_PIECE_SWIMSUIT: 12.0,
    Emoji.BRIEFS: 12.0,
    Emoji.SHORTS: 12.0,
    Emoji.BIKINI: 0.6,
    Emoji.WOMANS_CLOTHES: 0.6,
    Emoji.FOLDING_HAND_FAN: 15.0,
    Emoji.PURSE: 0.6,
    Emoji.HANDBAG: 0.6,
    Emoji.CLUTCH_BAG: 0.6,
    Emoji.SHOPPING_BAGS: 0.7,
    Emoji.BACKPACK: 0.6,
    Emoji.THONG_SANDAL: 13.0,
    Emoji.MANS_SHOE: 0.6,
    Emoji.RUNNING_SHOE: 0.6,
    Emoji.HIKING_BOOT: 11.0,
    Emoji.FLAT_SHOE: 11.0,
    Emoji.HIGH_HEELED_SHOE: 0.6,
    Emoji.WOMANS_SANDAL: 0.6,
    Emoji.BALLET_SHOES: 12.0,
    Emoji.WOMANS_BOOT: 0.6,
    Emoji.HAIR_PICK: 15.0,
    Emoji.CROWN: 0.6,
    Emoji.WOMANS_HAT: 0.6,
    Emoji.TOP_HAT: 0.6,
    Emoji.GRADUATION_CAP: 0.6,
    Emoji.BILLED_CAP: 5.0,
    Emoji.MILITARY_HELMET: 13.0,
    Emoji.RESCUE_WORKERS_HELMET: 0.7,
    Emoji.PRAYER_BEADS: 1.0,
    Emoji.LIPSTICK: 0.6,
    Emoji.RING: 0.6,
    Emoji.GEM_STONE: 0.6,
    Emoji.MUTED_SPEAKER: 1.0,
    Emoji.SPEAKER_LOW_VOLUME: 0.7,
    Emoji.SPEAKER_MEDIUM_VOLUME: 1.0,
    Emoji.SPEAKER_HIGH_VOLUME: 0.6,
    Emoji.LOUDSPEAKER: 0.6,
    Emoji.MEGAPHONE: 0.6,
    Emoji.POSTAL_HORN: 1.0,
    Emoji.BELL: 0.6,
    Emoji.BELL_WITH_SLASH: 1.0,
    Emoji.MUSICAL_SCORE: 0.6,
    Emoji.MUSICAL_NOTE: 0.6,
    Emoji.MUSICAL_NOTES: 0.6,
    Emoji.STUDIO_MICROPHONE: 0.7,
    Emoji.LEVEL_SLIDER: 0.7,
    Emoji.CONTROL_KNOBS: 0.7,
    Emoji.MICROPHONE: 0.6,
    Emoji.HEADPHONE: 0.6,
    Emoji.RADIO: 0.6,
    Emoji.SAXOPHONE: 0.6,
    Emoji.ACCORDION: 13.0,
    Emoji.GUITAR: 0.6,
    Emoji.MUSICAL_KEYBOARD: 0.6,
    Emoji.TRUMPET: 0.6,
    Emoji.VIOLIN: 0.6,
    Emoji.BANJO: 12.0,
    Emoji.DRUM: 3.0,
    Emoji.LONG_DRUM: 13.0,
    Emoji.MARACAS: 15.0,
    Emoji.FLUTE: 15.0,
    Emoji.MOBILE_PHONE: 0.6,
    Emoji.MOBILE_PHONE_WITH_ARROW: 0.6,
    Emoji.TELEPHONE: 0.6,
    Emoji.TELEPHONE_RECEIVER: 0.6,
    Emoji.PAGER: 0.6,
    Emoji.FAX_MACHINE: 0.6,
    Emoji.BATTERY: 0.6,
    Emoji.LOW_BATTERY: 14.0,
    Emoji.ELECTRIC_PLUG: 0.6,
    Emoji.LAPTOP: 0.6,
    Emoji.DESKTOP_COMPUTER: 0.7,
    Emoji.PRINTER: 0.7,
    Emoji.KEYBOARD: 1.0,
    Emoji.COMPUTER_MOUSE: 0.7,
    Emoji.TRACKBALL: 0.7,
    Emoji.COMPUTER_DISK: 0.6,
    Emoji.FLOPPY_DISK: 0.6,
    Emoji.OPTICAL_DISK: 0.6,
    Emoji.DVD: 0.6,
    Emoji.ABACUS: 11.0,
    Emoji.MOVIE_CAMERA: 0.6,
    Emoji.FILM_FRAMES: 0.7,
    Emoji.FILM_PROJECTOR: 0.7,
    Emoji.CLAPPER_BOARD: 0.6,
    Emoji.TELEVISION: 0.6,
    Emoji.CAMERA: 0.6,
    Emoji.CAMERA_WITH_FLASH: 1.0,
    Emoji.VIDEO_CAMERA: 0.6,
    Emoji.VIDEOCASSETTE: 0.6,
    Emoji.MAGNIFYING_GLASS_TILTED_LEFT: 0.6,
    Emoji.MAGNIFYING_GLASS_TILTED_RIGHT: 0.6,
    Emoji.CANDLE: 0.7,
    Emoji.LIGHT_BULB: 0.6,
    Emoji.FLASHLIGHT: 0.6,
    Emoji.RED_PAPER_LANTERN: 0.6,
    Emoji.DIYA_LAMP: 12.0,
    Emoji.NOTEBOOK_WITH_DECORATIVE_COVER: 0.6,
    Emoji.CLOSED_BOOK: 0.6,
    Emoji.OPEN_BOOK: 0.6,
    Emoji.GREEN_BOOK: 0.6,
    Emoji.BLUE_BOOK: 0.6,
    Emoji.ORANGE_BOOK: 0.6,
    Emoji.BOOKS: 0.6,
    Emoji.NOTEBOOK: 0.6,
    Emoji.LEDGER: 0.6,
    Emoji.PAGE_WITH_CURL: 0.6,
    Emoji.SCROLL: 0.6,
    Emoji.PAGE_FACING_UP: 0.6,
    Emoji.NEWSPAPER: 0.6,
    Emoji.ROLLED_UP_NEWSPAPER: 0.7,
    Emoji.BOOKMARK_TABS: 0.6,
    Emoji.BOOKMARK: 0.6,
    Emoji.LABEL: 0.7,
    Emoji.MONEY_BAG: 0.6,
    Emoji.COIN: 13.0,
    Emoji.YEN_BANKNOTE: 0.6,
    Emoji.DOLLAR_BANKNOTE: 0.6,
    Emoji.EURO_BANKNOTE: 1.0,
    Emoji.POUND_BANKNOTE: 1.0,
    Emoji.MONEY_WITH_WINGS: 0.6,
    Emoji.CREDIT_CARD: 0.6,
    Emoji.RECEIPT: 11.0,
    Emoji.CHART_INCREASING_WITH_YEN: 0.6,
    Emoji.ENVELOPE: 0.6,
    Emoji.E_MAIL: 0.6,
    Emoji.INCOMING_ENVELOPE: 0.6,
    Emoji.ENVELOPE_WITH_ARROW: 0.6,
    Emoji.OUTBOX_TRAY: 0.6,
    Emoji.INBOX_TRAY: 0.6,
    Emoji.PACKAGE: 0.6,
    Emoji.CLOSED_MAILBOX_WITH_RAISED_FLAG: 0.6,
    Emoji.CLOSED_MAILBOX_WITH_LOWERED_FLAG: 0.6,
    Emoji.OPEN_MAILBOX_WITH_RAISED_FLAG: 0.7,
    Emoji.OPEN_MAILBOX_WITH_LOWERED_FLAG: 0.7,
    Emoji.POSTBOX: 0.6,
    Emoji.BALLOT_BOX_WITH_BALLOT: 0.7,
    Emoji.PENCIL: 0.6,
    Emoji.BLACK_NIB: 0.6,
    Emoji.FOUNTAIN_PEN: 0.7,
    Emoji.PEN: 0.7,
    Emoji.PAINTBRUSH: 0.7,
    Emoji.CRAYON: 0.7,
    Emoji.MEMO: 0.6,
    Emoji.BRIEFCASE: 0.6,
    Emoji.FILE_FOLDER: 0.6,
    Emoji.OPEN_FILE_FOLDER: 0.6,
    Emoji.CARD_INDEX_DIVIDERS: 0.7,
    Emoji.CALENDAR: 0.6,
    Emoji.TEAR_OFF_CALENDAR: 0.6,
    Emoji.SPIRAL_NOTEPAD: 0.7,
    Emoji.SPIRAL_CALENDAR: 0.7,
    Emoji.CARD_INDEX: 0.6,
    Emoji.CHART_INCREASING: 0.6,
    Emoji.CHART_DECREASING: 0.6,
    Emoji.BAR_CHART: 0.6,
    Emoji.CLIPBOARD: 0.6,
    Emoji.PUSHPIN: 0.6,
    Emoji.ROUND_PUSHPIN: 0.6,
    Emoji.PAPERCLIP: 0.6,
    Emoji.LINKED_PAPERCLIPS: 0.7,
    Emoji.STRAIGHT_RULER: 0.6,
    Emoji.TRIANGULAR_RULER: 0.6,
    Emoji.SCISSORS: 0.6,
    Emoji.CARD_FILE_BOX: 0.7,
    Emoji.FILE_CABINET: 0.7,
    Emoji.WASTEBASKET: 0.7,
    Emoji.LOCKED: 0.6,
    Emoji.UNLOCKED: 0.6,
    Emoji.LOCKED_WITH_PEN: 0.6,
    Emoji.LOCKED_WITH_KEY: 0.6,
    Emoji.KEY: 0.6,
    Emoji.OLD_KEY: 0.7,
    Emoji.HAMMER: 0.6,
    Emoji.AXE: 12.0,
    Emoji.PICK: 0.7,
    Emoji.HAMMER_AND_PICK: 1.0,
    Emoji.HAMMER_AND_WRENCH: 0.7,
    Emoji.DAGGER: 0.7,
    Emoji.CROSSED_SWORDS: 1.0,
    Emoji.BOMB: 0.6,
    Emoji.BOOMERANG: 13.0,
    Emoji.BOW_AND_ARROW: 1.0,
    Emoji.SHIELD: 0.7,
    Emoji.CARPENTRY_SAW: 13.0,
    Emoji.WRENCH: 0.6,
    Emoji.SCREWDRIVER: 13.0,
    Emoji.NUT_AND_BOLT: 0.6,
    Emoji.GEAR: 1.0,
    Emoji.CLAMP: 0.7,
    Emoji.BALANCE_SCALE: 1.0,
    Emoji.WHITE_CANE: 12.0,
    Emoji.LINK: 0.6,
    Emoji.BROKEN_CHAIN: 15.1,
    Emoji.CHAINS: 0.7,
    Emoji.HOOK: 13.0,
    Emoji.TOOLBOX: 11.0,
    Emoji.MAGNET: 11.0,
    Emoji.LADDER: 13.0,
    Emoji.ALEMBIC: 1.0,
    Emoji.TEST_TUBE: 11.0,
    Emoji.PETRI_DISH: 11.0,
    Emoji.DNA: 11.0,
    Emoji.MICROSCOPE: 1.0,
    Emoji.TELESCOPE: 1.0,
    Emoji.SATELLITE_ANTENNA: 0.6,
    Emoji.SYRINGE: 0.6,
    Emoji.DROP_OF_BLOOD: 12.0,
    Emoji.PILL: 0.6,
    Emoji.ADHESIVE_BANDAGE: 12.0,
    Emoji.CRUTCH: 14.0,
    Emoji.STETHOSCOPE: 12.0,
    Emoji.X_RAY: 14.0,
    Emoji.DOOR: 0.6,
    Emoji.ELEVATOR: 13.0,
    Emoji.MIRROR: 13.0,
    Emoji.WINDOW: 13.0,
    Emoji.BED: 0.7,
    Emoji.COUCH_AND_LAMP: 0.7,
    Emoji.CHAIR: 12.0,
    Emoji.TOILET: 0.6,
    Emoji.PLUNGER: 13.0,
    Emoji.SHOWER: 1.0,
    Emoji.BATHTUB: 1.0,
    Emoji.MOUSE_TRAP: 13.0,
    Emoji.RAZOR: 12.0,
    Emoji.LOTION_BOTTLE: 11.0,
    Emoji.SAFETY_PIN: 11.0,
    Emoji.BROOM: 11.0,
    Emoji.BASKET: 11.0,
    Emoji.ROLL_OF_PAPER: 11.0,
    Emoji.BUCKET: 13.0,
    Emoji.SOAP: 11.0,
    Emoji.BUBBLES: 14.0,
    Emoji.TOOTHBRUSH: 13.0,
    Emoji.SPONGE: 11.0,
    Emoji.FIRE_EXTINGUISHER: 11.0,
    Emoji.SHOPPING_CART: 3.0,
    Emoji.CIGARETTE: 0.6,
    Emoji.COFFIN: 1.0,
    Emoji.HEADSTONE: 13.0,
    Emoji.FUNERAL_URN: 1.0,
    Emoji.NAZAR_AMULET: 11.0,
    Emoji.HAMSA: 14.0,
    Emoji.MOAI: 0.6,
    Emoji.PLACARD: 13.0,
    Emoji.IDENTIFICATION_CARD: 14.0,
    Emoji.ATM_SIGN: 0.6,
    Emoji.LITTER_IN_BIN_SIGN: 1.0,
    Emoji.POTABLE_WATER: 1.0,
    Emoji.WHEELCHAIR_SYMBOL: 0.6,
    Emoji.MENS_ROOM: 0.6,
    Emoji.WOMENS_ROOM: 0.6,
    Emoji.RESTROOM: 0.6,
    Emoji.BABY_SYMBOL: 0.6,
    Emoji.WATER_CLOSET: 0.6,
    Emoji.PASSPORT_CONTROL: 1.0,
    Emoji.CUSTOMS: 1.0,
    Emoji.BAGGAGE_CLAIM: 1.0,
    Emoji.LEFT_LUGGAGE: 1.0,
    Emoji.WARNING: 0.6,
    Emoji.CHILDREN_CROSSING: 1.0,
    Emoji.NO_ENTRY: 0.6,
    Emoji.PROHIBITED: 0.6,
    Emoji.NO_BICYCLES: 1.0,
    Emoji.NO_SMOKING: 0.6,
    Emoji.NO_LITTERING: 1.0,
    Emoji.NON_POTABLE_WATER: 1.0,
    Emoji.NO_PEDESTRIANS: 1.0,
    Emoji.NO_MOBILE_PHONES: 1.0,
    Emoji.NO_ONE_UNDER_EIGHTEEN: 0.6,
    Emoji.RADIOACTIVE: 1.0,
    Emoji.BIOHAZARD: 1.0,
    Emoji.UP_ARROW: 0.6,
    Emoji.UP_RIGHT_ARROW: 0.6,
    Emoji.RIGHT_ARROW: 0.6,
    Emoji.DOWN_RIGHT_ARROW: 0.6,
    Emoji.DOWN_ARROW: 0.6,
    Emoji.DOWN_LEFT_ARROW: 0.6,
    Emoji.LEFT_ARROW: 0.6,
    Emoji.UP_LEFT_ARROW: 0.6,
    Emoji.UP_DOWN_ARROW: 0.6,
    Emoji.LEFT_RIGHT_ARROW: 0.6,
    Emoji.RIGHT_ARROW_CURVING_LEFT: 0.6,
    Emoji.LEFT_ARROW_CURVING_RIGHT: 0.6,
    Emoji.RIGHT_ARROW_CURVING_UP: 0.6,
    Emoji.RIGHT_ARROW_CURVING_DOWN: 0.6,
    Emoji.CLOCKWISE_VERTICAL_ARROWS: 0.6,
    Emoji.COUNTERCLOCKWISE_ARROWS_BUTTON: 1.0,
    Emoji.BACK_ARROW: 0.6,
    Emoji.END_ARROW: 0.6,
    Emoji.ON_ARROW: 0.6,
    Emoji.SOON_ARROW: 0.6,
    Emoji.TOP_ARROW: 0.6,
    Emoji.PLACE_OF_WORSHIP: 1.0,
    Emoji.ATOM_SYMBOL: 1.0,
    Emoji.OM: 0.7,
    Emoji.STAR_OF_DAVID: 0.7,
    Emoji.WHEEL_OF_DHARMA: 0.7,
    Emoji.YIN_YANG: 0.7,
    Emoji.LATIN_CROSS: 0.7,
    Emoji.ORTHODOX_CROSS: 1.0,
    Emoji.STAR_AND_CRESCENT: 0.7,
    Emoji.PEACE_SYMBOL: 1.0,
    Emoji.MENORAH: 1.0,
    Emoji.DOTTED_SIX_POINTED_STAR: 0.6,
    Emoji.KHANDA: 15.0,
    Emoji.ARIES: 0.6,
    Emoji.TAURUS: 0.6,
    Emoji.GEMINI: 0.6,
    Emoji.CANCER: 0.6,
    Emoji.LEO: 0.6,
    Emoji.VIRGO: 0.6,
    Emoji.LIBRA: 0.6,
    Emoji.SCORPIO: 0.6,
    Emoji.SAGITTARIUS: 0.6,
    Emoji.CAPRICORN: 0.6,
    Emoji.AQUARIUS: 0.6,
    Emoji.PISCES: 0.6,
    Emoji.OPHIUCHUS: 0.6,
    Emoji.SHUFFLE_TRACKS_BUTTON: 1.0,
    Emoji.REPEAT_BUTTON: 1.0,
    Emoji.REPEAT_SINGLE_BUTTON: 1.0,
    Emoji.PLAY_BUTTON: 0.6,
    Emoji.FAST_FORWARD_BUTTON: 0.6,
    Emoji.NEXT_TRACK_BUTTON: 0.7,
    Emoji.PLAY_OR_PAUSE_BUTTON: 1.0,
    Emoji.REVERSE_BUTTON: 0.6,
    Emoji.FAST_REVERSE_BUTTON: 0.6,
    Emoji.LAST_TRACK_BUTTON: 0.7,
    Emoji.UPWARDS_BUTTON: 0.6,
    Emoji.FAST_UP_BUTTON: 0.6,
    Emoji.DOWNWARDS_BUTTON: 0.6,
    Emoji.FAST_DOWN_BUTTON: 0.6,
    Emoji.PAUSE_BUTTON: 0.7,
    Emoji.STOP_BUTTON: 0.7,
    Emoji.RECORD_BUTTON: 0.7,
    Emoji.EJECT_BUTTON: 1.0,
    Emoji.CINEMA: 0.6,
    Emoji.DIM_BUTTON: 1.0,
    Emoji.BRIGHT_BUTTON: 1.0,
    Emoji.ANTENNA_BARS: 0.6,
    Emoji.WIRELESS: 15.0,
    Emoji.VIBRATION_MODE: 0.6,
    Emoji.MOBILE_PHONE_OFF: 0.6,
    Emoji.FEMALE_SIGN: 4.0,
    Emoji.MALE_SIGN: 4.0,
    Emoji.TRANSGENDER_SYMBOL: 13.0,
    Emoji.MULTIPLY: 0.6,
    Emoji.PLUS: 0.6,
    Emoji.MINUS: 0.6,
    Emoji.DIVIDE: 0.6,
    Emoji.HEAVY_EQUALS_SIGN: 14.0,
    Emoji.INFINITY: 11.0,
    Emoji.DOUBLE_EXCLAMATION_MARK: 0.6,
    Emoji.EXCLAMATION_QUESTION_MARK: 0.6,
    Emoji.RED_QUESTION_MARK: 0.6,
    Emoji.WHITE_QUESTION_MARK: 0.6,
    Emoji.WHITE_EXCLAMATION_MARK: 0.6,
    Emoji.RED_EXCLAMATION_MARK: 0.6,
    Emoji.WAVY_DASH: 0.6,
    Emoji.CURRENCY_EXCHANGE: 0.6,
    Emoji.HEAVY_DOLLAR_SIGN: 0.6,
    Emoji.MEDICAL_SYMBOL: 4.0,
    Emoji.RECYCLING_SYMBOL: 0.6,
    Emoji.FLEUR_DE_LIS: 1.0,
    Emoji.TRIDENT_EMBLEM: 0.6,
    Emoji.NAME_BADGE: 0.6,
    Emoji.JAPANESE_SYMBOL_FOR_BEGINNER: 0.6,
    Emoji.HOLLOW_RED_CIRCLE: 0.6,
    Emoji.CHECK_MARK_BUTTON: 0.6,
    Emoji.CHECK_BOX_WITH_CHECK: 0.6,
    Emoji.CHECK_MARK: 0.6,
    Emoji.CROSS_MARK: 0.6,
    Emoji.CROSS_MARK_BUTTON: 0.6,
    Emoji.CURLY_LOOP: 0.6,
    Emoji.DOUBLE_CURLY_LOOP: 1.0,
    Emoji.PART_ALTERNATION_MARK: 0.6,
    Emoji.EIGHT_SPOKED_ASTERISK: 0.6,
    Emoji.EIGHT_POINTED_STAR: 0.6,
    Emoji.SPARKLE: 0.6,
    Emoji.COPYRIGHT: 0.6,
    Emoji.REGISTERED: 0.6,
    Emoji.TRADE_MARK: 0.6,
    Emoji.KEYCAP_NUMBER_SIGN: 0.6,
    Emoji.KEYCAP_ASTERISK: 2.0,
    Emoji.KEYCAP_0: 0.6,
    Emoji.KEYCAP_1: 0.6,
    Emoji.KEYCAP_2: 0.6,
    Emoji.KEYCAP_3: 0.6,
    Emoji.KEYCAP_4: 0.6,
    Emoji.KEYCAP_5: 0.6,
    Emoji.KEYCAP_6: 0.6,
    Emoji.KEYCAP_7: 0.6,
    Emoji.KEYCAP_8: 0.6,
    Emoji.KEYCAP_9: 0.6,
    Emoji.KEYCAP_10: 0.6,
    Emoji.INPUT_LATIN_UPPERCASE: 0.6,
    Emoji.INPUT_LATIN_LOWERCASE: 0.6,
    Emoji.INPUT_NUMBERS: 0.6,
    Emoji.INPUT_SYMBOLS: 0.6,
    Emoji.INPUT_LATIN_LETTERS: 0.6,
    Emoji.A_BUTTON_BLOOD_TYPE: 0.6,
    Emoji.AB_BUTTON_BLOOD_TYPE: 0.6,
    Emoji.B_BUTTON_BLOOD_TYPE: 0.6,
    Emoji.CL_BUTTON: 0.6,
    Emoji.COOL_BUTTON: 0.6,
    Emoji.FREE_BUTTON: 0.6,
    Emoji.INFORMATION: 0.6,
    Emoji.ID_BUTTON: 0.6,
    Emoji.CIRCLED_M: 0.6,
    Emoji.NEW_BUTTON: 0.6,
    Emoji.NG_BUTTON: 0.6,
    Emoji.O_BUTTON_BLOOD_TYPE: 0.6,
    Emoji.OK_BUTTON: 0.6,
    Emoji.P_BUTTON: 0.6,
    Emoji.SOS_BUTTON: 0.6,
    Emoji.UP_BUTTON: 0.6,
    Emoji.VS_BUTTON: 0.6,
    Emoji.JAPANESE_HERE_BUTTON: 0.6,
    Emoji.JAPANESE_SERVICE_CHARGE_BUTTON: 0.6,
    Emoji.JAPANESE_MONTHLY_AMOUNT_BUTTON: 0.6,
    Emoji.JAPANESE_NOT_FREE_OF_CHARGE_BUTTON: 0.6,
    Emoji.JAPANESE_RESERVED_BUTTON: 0.6,
    Emoji.JAPANESE_BARGAIN_BUTTON: 0.6,
    Emoji.JAPANESE_DISCOUNT_BUTTON: 0.6,
    Emoji.JAPANESE_FREE_OF_CHARGE_BUTTON: 0.6,
    Emoji.JAPANESE_PROHIBITED_BUTTON: 0.6,
    Emoji.JAPANESE_ACCEPTABLE_BUTTON: 0.6,
    Emoji.JAPANESE_APPLICATION_BUTTON: 0.6,
    Emoji.JAPANESE_PASSING_GRADE_BUTTON: 0.6,
    Emoji.JAPANESE_VACANCY_BUTTON: 0.6,
    Emoji.JAPANESE_CONGRATULATIONS_BUTTON: 0.6,
    Emoji.JAPANESE_SECRET_BUTTON: 0.6,
    Emoji.JAPANESE_OPEN_FOR_BUSINESS_BUTTON: 0.6,
    Emoji.JAPANESE_NO_VACANCY_BUTTON: 0.6,
    Emoji.RED_CIRCLE: 0.6,
    Emoji.ORANGE_CIRCLE: 12.0,
    Emoji.YELLOW_CIRCLE: 12.0,
    Emoji.GREEN_CIRCLE: 12.0,
    Emoji.BLUE_CIRCLE: 0.6,
    Emoji.PURPLE_CIRCLE: 12.0,
    Emoji.BROWN_CIRCLE: 12.0,
    Emoji.BLACK_CIRCLE: 0.6,
    Emoji.WHITE_CIRCLE: 0.6,
    Emoji.RED_SQUARE: 12.0,
    Emoji.ORANGE_SQUARE: 12.0,
    Emoji.YELLOW_SQUARE: 12.0,
    Emoji.GREEN_SQUARE: 12.0,
    Emoji.BLUE_SQUARE: 12.0,
    Emoji.PURPLE_SQUARE: 12.0,
    Emoji.BROWN_SQUARE: 12.0,
    Emoji.BLACK_LARGE_SQUARE: 0.6,
    Emoji.WHITE_LARGE_SQUARE: 0.6,
    Emoji.BLACK_MEDIUM_SQUARE: 0.6,
    Emoji.WHITE_MEDIUM_SQUARE: 0.6,
    Emoji.BLACK_MEDIUM_SMALL_SQUARE: 0.6,
    Emoji.WHITE_MEDIUM_SMALL_SQUARE: 0.6,
    Emoji.BLACK_SMALL_SQUARE: 0.6,
    Emoji.WHITE_SMALL_SQUARE: 0.6,
    Emoji.LARGE_ORANGE_DIAMOND: 0.6,
    Emoji.LARGE_BLUE_DIAMOND: 0.6,
    Emoji.SMALL_ORANGE_DIAMOND: 0.6,
    Emoji.SMALL_BLUE_DIAMOND: 0.6,
    Emoji.RED_TRIANGLE_POINTED_UP: 0.6,
    Emoji.RED_TRIANGLE_POINTED_DOWN: 0.6,
    Emoji.DIAMOND_WITH_A_DOT: 0.6,
    Emoji.RADIO_BUTTON: 0.6,
    Emoji.WHITE_SQUARE_BUTTON: 0.6,
    Emoji.BLACK_SQUARE_BUTTON: 0.6,
    Emoji.CHEQUERED_FLAG: 0.6,
    Emoji.TRIANGULAR_FLAG: 0.6,
    Emoji.CROSSED_FLAGS: 0.6,
    Emoji.BLACK_FLAG: 1.0,
    Emoji.WHITE_FLAG: 0.7,
    Emoji.RAINBOW_FLAG: 4.0,
    Emoji.TRANSGENDER_FLAG: 13.0,
    Emoji.PIRATE_FLAG: 11.0,
    Emoji.FLAG_ASCENSION_ISLAND: 2.0,
    Emoji.FLAG_ANDORRA: 2.0,
    Emoji.FLAG_UNITED_ARAB_EMIRATES: 2.0,
    Emoji.FLAG_AFGHANISTAN: 2.0,
    Emoji.FLAG_ANTIGUA_AND_BARBUDA: 2.0,
    Emoji.FLAG_ANGUILLA: 2.0,
    Emoji.FLAG_ALBANIA: 2.0,
    Emoji.FLAG_ARMENIA: 2.0,
    Emoji.FLAG_ANGOLA: 2.0,
    Emoji.FLAG_ANTARCTICA: 2.0,
    Emoji.FLAG_ARGENTINA: 2.0,
    Emoji.FLAG_AMERICAN_SAMOA: 2.0,
    Emoji.FLAG_AUSTRIA: 2.0,
    Emoji.FLAG_AUSTRALIA: 2.0,
    Emoji.FLAG_ARUBA: 2.0,
    Emoji.FLAG_ALAND_ISLANDS: 2.0,
    Emoji.FLAG_AZERBAIJAN: 2.0,
    Emoji.FLAG_BOSNIA_AND_HERZEGOVINA: 2.0,
    Emoji.FLAG_BARBADOS: 2.0,
    Emoji.FLAG_BANGLADESH: 2.0,
    Emoji.FLAG_BELGIUM: 2.0,
    Emoji.FLAG_BURKINA_FASO: 2.0,
    Emoji.FLAG_BULGARIA: 2.0,
    Emoji.FLAG_BAHRAIN: 2.0,
    Emoji.FLAG_BURUNDI: 2.0,
    Emoji.FLAG_BENIN: 2.0,
    Emoji.FLAG_ST_BARTHELEMY: 2.0,
    Emoji.FLAG_BERMUDA: 2.0,
    Emoji.FLAG_BRUNEI: 2.0,
    Emoji.FLAG_BOLIVIA: 2.0,
    Emoji.FLAG_CARIBBEAN_NETHERLANDS: 2.0,
    Emoji.FLAG_BRAZIL: 2.0,
    Emoji.FLAG_BAHAMAS: 2.0,
    Emoji.FLAG_BHUTAN: 2.0,
    Emoji.FLAG_BOUVET_ISLAND: 2.0,
    Emoji.FLAG_BOTSWANA: 2.0,
    Emoji.FLAG_BELARUS: 2.0,
    Emoji.FLAG_BELIZE: 2.0,
    Emoji.FLAG_CANADA: 2.0,
    Emoji.FLAG_COCOS_KEELING_ISLANDS: 2.0,
    Emoji.FLAG_CONGO_KINSHASA: 2.0,
    Emoji.FLAG_CENTRAL_AFRICAN_REPUBLIC: 2.0,
    Emoji.FLAG_CONGO_BRAZZAVILLE: 2.0,
    Emoji.FLAG_SWITZERLAND: 2.0,
    Emoji.FLAG_COTE_DIVOIRE: 2.0,
    Emoji.FLAG_COOK_ISLANDS: 2.0,
    Emoji.FLAG_CHILE: 2.0,
    Emoji.FLAG_CAMEROON: 2.0,
    Emoji.FLAG_CHINA: 0.6,
    Emoji.FLAG_COLOMBIA: 2.0,
    Emoji.FLAG_CLIPPERTON_ISLAND: 2.0,
    Emoji.FLAG_COSTA_RICA: 2.0,
    Emoji.FLAG_CUBA: 2.0,
    Emoji.FLAG_CAPE_VERDE: 2.0,
    Emoji.FLAG_CURACAO: 2.0,
    Emoji.FLAG_CHRISTMAS_ISLAND: 2.0,
    Emoji.FLAG_CYPRUS: 2.0,
    Emoji.FLAG_CZECHIA: 2.0,
    Emoji.FLAG_GERMANY: 0.6,
    Emoji.FLAG_DIEGO_GARCIA: 2.0,
    Emoji.FLAG_DJIBOUTI: 2.0,
    Emoji.FLAG_DENMARK: 2.0,
    Emoji.FLAG_DOMINICA: 2.0,
    Emoji.FLAG_DOMINICAN_REPUBLIC: 2.0,
    Emoji.FLAG_ALGERIA: 2.0,
    Emoji.FLAG_CEUTA_AND_MELILLA: 2.0,
    Emoji.FLAG_ECUADOR: 2.0,
    Emoji.FLAG_ESTONIA: 2.0,
    Emoji.FLAG_EGYPT: 2.0,
    Emoji.FLAG_WESTERN_SAHARA: 2.0,
    Emoji.FLAG_ERITREA: 2.0,
    Emoji.FLAG_SPAIN: 0.6,
    Emoji.FLAG_ETHIOPIA: 2.0,
    Emoji.FLAG_EUROPEAN_UNION: 2.0,
    Emoji.FLAG_FINLAND: 2.0,
    Emoji.FLAG_FIJI: 2.0,
    Emoji.FLAG_FALKLAND_ISLANDS: 2.0,
    Emoji.FLAG_MICRONESIA: 2.0,
    Emoji.FLAG_FAROE_ISLANDS: 2.0,
    Emoji.FLAG_FRANCE: 0.6,
    Emoji.FLAG_GABON: 2.0,
    Emoji.FLAG_UNITED_KINGDOM: 0.6,
    Emoji.FLAG_GRENADA: 2.0,
    Emoji.FLAG_GEORGIA: 2.0,
    Emoji.FLAG_FRENCH_GUIANA: 2.0,
    Emoji.FLAG_GUERNSEY: 2.0,
    Emoji.FLAG_GHANA: 2.0,
    Emoji.FLAG_GIBRALTAR: 2.0,
    Emoji.FLAG_GREENLAND: 2.0,
    Emoji.FLAG_GAMBIA: 2.0,
    Emoji.FLAG_GUINEA: 2.0,
    Emoji.FLAG_GUADELOUPE: 2.0,
    Emoji.FLAG_EQUATORIAL_GUINEA: 2.0,
    Emoji.FLAG_GREECE: 2.0,
    Emoji.FLAG_SOUTH_GEORGIA_AND_SOUTH_SANDWICH_ISLANDS: 2.0,
    Emoji.FLAG_GUATEMALA: 2.0,
    Emoji.FLAG_GUAM: 2.0,
    Emoji.FLAG_GUINEA_BISSAU: 2.0,
    Emoji.FLAG_GUYANA: 2.0,
    Emoji.FLAG_HONG_KONG_SAR_CHINA: 2.0,
    Emoji.FLAG_HEARD_AND_MCDONALD_ISLANDS: 2.0,
    Emoji.FLAG_HONDURAS: 2.0,
    Emoji.FLAG_CROATIA: 2.0,
    Emoji.FLAG_HAITI: 2.0,
    Emoji.FLAG_HUNGARY: 2.0,
    Emoji.FLAG_CANARY_ISLANDS: 2.0,
    Emoji.FLAG_INDONESIA: 2.0,
    Emoji.FLAG_IRELAND: 2.0,
    Emoji.FLAG_ISRAEL: 2.0,
    Emoji.FLAG_ISLE_OF_MAN: 2.0,
    Emoji.FLAG_INDIA: 2.0,
    Emoji.FLAG_BRITISH_INDIAN_OCEAN_TERRITORY: 2.0,
    Emoji.FLAG_IRAQ: 2.0,
    Emoji.FLAG_IRAN: 2.0,
    Emoji.FLAG_ICELAND: 2.0,
    Emoji.FLAG_ITALY: 0.6,
    Emoji.FLAG_JERSEY: 2.0,
    Emoji.FLAG_JAMAICA: 2.0,
    Emoji.FLAG_JORDAN: 2.0,
    Emoji.FLAG_JAPAN: 0.6,
    Emoji.FLAG_KENYA: 2.0,
    Emoji.FLAG_KYRGYZSTAN: 2.0,
    Emoji.FLAG_CAMBODIA: 2.0,
    Emoji.FLAG_KIRIBATI: 2.0,
    Emoji.FLAG_COMOROS: 2.0,
    Emoji.FLAG_ST_KITTS_AND_NEVIS: 2.0,
    Emoji.FLAG_NORTH_KOREA: 2.0,
    Emoji.FLAG_SOUTH_KOREA: 0.6,
    Emoji.FLAG_KUWAIT: 2.0,
    Emoji.FLAG_CAYMAN_ISLANDS: 2.0,
    Emoji.FLAG_KAZAKHSTAN: 2.0,
    Emoji.FLAG_LAOS: 2.0,
    Emoji.FLAG_LEBANON: 2.0,
    Emoji.FLAG_ST_LUCIA: 2.0,
    Emoji.FLAG_LIECHTENSTEIN: 2.0,
    Emoji.FLAG_SRI_LANKA: 2.0,
    Emoji.FLAG_LIBERIA: 2.0,
    Emoji.FLAG_LESOTHO: 2.0,
    Emoji.FLAG_LITHUANIA: 2.0,
    Emoji.FLAG_LUXEMBOURG: 2.0,
    Emoji.FLAG_LATVIA: 2.0,
    Emoji.FLAG_LIBYA: 2.0,
    Emoji.FLAG_MOROCCO: 2.0,
    Emoji.FLAG_MONACO: 2.0,
    Emoji.FLAG_MOLDOVA: 2.0,
    Emoji.FLAG_MONTENEGRO: 2.0,
    Emoji.FLAG_ST_MARTIN: 2.0,
    Emoji.FLAG_MADAGASCAR: 2.0,
    Emoji.FLAG_MARSHALL_ISLANDS: 2.0,
    Emoji.FLAG_NORTH_MACEDONIA: 2.0,
    Emoji.FLAG_MALI: 2.0,
    Emoji.FLAG_MYANMAR_BURMA: 2.0,
    Emoji.FLAG_MONGOLIA: 2.0,
    Emoji.FLAG_MACAO_SAR_CHINA: 2.0,
    Emoji.FLAG_NORTHERN_MARIANA_ISLANDS: 2.0,
    Emoji.FLAG_MARTINIQUE: 2.0,
    Emoji.FLAG_MAURITANIA: 2.0,
    Emoji.FLAG_MONTSERRAT: 2.0,
    Emoji.FLAG_MALTA: 2.0,
    Emoji.FLAG_MAURITIUS: 2.0,
    Emoji.FLAG_MALDIVES: 2.0,
    Emoji.FLAG_MALAWI: 2.0,
    Emoji.FLAG_MEXICO: 2.0,
    Emoji.FLAG_MALAYSIA: 2.0,
    Emoji.FLAG_MOZAMBIQUE: 2.0,
    Emoji.FLAG_NAMIBIA: 2.0,
    Emoji.FLAG_NEW_CALEDONIA: 2.0,
    Emoji.FLAG_NIGER: 2.0,
    Emoji.FLAG_NORFOLK_ISLAND: 2.0,
    Emoji.FLAG_NIGERIA: 2.0,
    Emoji.FLAG_NICARAGUA: 2.0,
    Emoji.FLAG_NETHERLANDS: 2.0,
    Emoji.FLAG_NORWAY: 2.0,
    Emoji.FLAG_NEPAL: 2.0,
    Emoji.FLAG_NAURU: 2.0,
    Emoji.FLAG_NIUE: 2.0,
    Emoji.FLAG_NEW_ZEALAND: 2.0,
    Emoji.FLAG_OMAN: 2.0,
    Emoji.FLAG_PANAMA: 2.0,
    Emoji.FLAG_PERU: 2.0,
    Emoji.FLAG_FRENCH_POLYNESIA: 2.0,
    Emoji.FLAG_PAPUA_NEW_GUINEA: 2.0,
    Emoji.FLAG_PHILIPPINES: 2.0,
    Emoji.FLAG_PAKISTAN: 2.0,
    Emoji.FLAG_POLAND: 2.0,
    Emoji.FLAG_ST_PIERRE_AND_MIQUELON: 2.0,
    Emoji.FLAG_PITCAIRN_ISLANDS: 2.0,
    Emoji.FLAG_PUERTO_RICO: 2.0,
    Emoji.FLAG_PALESTINIAN_TERRITORIES: 2.0,
    Emoji.FLAG_PORTUGAL: 2.0,
    Emoji.FLAG_PALAU: 2.0,
    Emoji.FLAG_PARAGUAY: 2.0,
    Emoji.FLAG_QATAR: 2.0,
    Emoji.FLAG_REUNION: 2.0,
    Emoji.FLAG_ROMANIA: 2.0,
    Emoji.FLAG_SERBIA: 2.0,
    Emoji.FLAG_RUSSIA: 0.6,
    Emoji.FLAG_RWANDA: 2.0,
    Emoji.FLAG_SAUDI_ARABIA: 2.0,
    Emoji.FLAG_SOLOMON_ISLANDS: 2.0,
    Emoji.FLAG_SEYCHELLES: 2.0,
    Emoji.FLAG_SUDAN: 2.0,
    Emoji.FLAG_SWEDEN: 2.0,
    Emoji.FLAG_SINGAPORE: 2.0,
    Emoji.FLAG_ST_HELENA: 2.0,
    Emoji.FLAG_SLOVENIA: 2.0,
    Emoji.FLAG_SVALBARD_AND_JAN_MAYEN: 2.0,
    Emoji.FLAG_SLOVAKIA: 2.0,
    Emoji.FLAG_SIERRA_LEONE: 2.0,
    Emoji.FLAG_SAN_MARINO: 2.0,
    Emoji.FLAG_SENEGAL: 2.0,
    Emoji.FLAG_SOMALIA: 2.0,
    Emoji.FLAG_SURINAME: 2.0,
    Emoji.FLAG_SOUTH_SUDAN: 2.0,
    Emoji.FLAG_SAO_TOME_AND_PRINCIPE: 2.0,
    Emoji.FLAG_EL_SALVADOR: 2.0,
    Emoji.FLAG_SINT_MAARTEN: 2.0,
    Emoji.FLAG_SYRIA: 2.0,
    Emoji.FLAG_ESWATINI: 2.0,
    Emoji.FLAG_TRISTAN_DA_CUNHA: 2.0,
    Emoji.FLAG_TURKS_AND_CAICOS_ISLANDS: 2.0,
    Emoji.FLAG_CHAD: 2.0,
    Emoji.FLAG_FRENCH_SOUTHERN_TERRITORIES: 2.0,
    Emoji.FLAG_TOGO: 2.0,
    Emoji.FLAG_THAILAND: 2.0,
    Emoji.FLAG_TAJIKISTAN: 2.0,
    Emoji.FLAG_TOKELAU: 2.0,
    Emoji.FLAG_TIMOR_LESTE: 2.0,
    Emoji.FLAG_TURKMENISTAN: 2.0,
    Emoji.FLAG_TUNISIA: 2.0,
    Emoji.FLAG_TONGA: 2.0,
    Emoji.FLAG_TURKIYE: 2.0,
    Emoji.FLAG_TRINIDAD_AND_TOBAGO: 2.0,
    Emoji.FLAG_TUVALU: 2.0,
    Emoji.FLAG_TAIWAN: 2.0,
    Emoji.FLAG_TANZANIA: 2.0,
    Emoji.FLAG_UKRAINE: 2.0,
    Emoji.FLAG_UGANDA: 2.0,
    Emoji.FLAG_U_S_OUTLYING_ISLANDS: 2.0,
    Emoji.FLAG_UNITED_NATIONS: 4.0,
    Emoji.FLAG_UNITED_STATES: 0.6,
    Emoji.FLAG_URUGUAY: 2.0,
    Emoji.FLAG_UZBEKISTAN: 2.0,
    Emoji.FLAG_VATICAN_CITY: 2.0,
    Emoji.FLAG_ST_VINCENT_AND_GRENADINES: 2.0,
    Emoji.FLAG_VENEZUELA: 2.0,
    Emoji.FLAG_BRITISH_VIRGIN_ISLANDS: 2.0,
    Emoji.FLAG_U_S_VIRGIN_ISLANDS: 2.0,
    Emoji.FLAG_VIETNAM: 2.0,
    Emoji.FLAG_VANUATU: 2.0,
    Emoji.FLAG_WALLIS_AND_FUTUNA: 2.0,
    Emoji.FLAG_SAMOA: 2.0,
    Emoji.FLAG_KOSOVO: 2.0,
    Emoji.FLAG_YEMEN: 2.0,
    Emoji.FLAG_MAYOTTE: 2.0,
    Emoji.FLAG_SOUTH_AFRICA: 2.0,
    Emoji.FLAG_ZAMBIA: 2.0,
    Emoji.FLAG_ZIMBABWE: 2.0,
    Emoji.FLAG_ENGLAND: 5.0,
    Emoji.FLAG_SCOTLAND: 5.0,
    Emoji.FLAG_WALES: 5.0,
}

SKIN_TONE_VARIANTS: Final[dict[Emoji, dict[tuple[SkinTone, ...], str]]] = {
    Emoji.WAVING_HAND: {
        (SkinTone.LIGHT,): '\U0001f44b\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f44b\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f44b\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f44b\U0001f3fe',
        (SkinTone.DARK,): '\U0001f44b\U0001f3ff',
    },
    Emoji.RAISED_BACK_OF_HAND: {
        (SkinTone.LIGHT,): '\U0001f91a\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f91a\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f91a\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f91a\U0001f3fe',
        (SkinTone.DARK,): '\U0001f91a\U0001f3ff',
    },
    Emoji.HAND_WITH_FINGERS_SPLAYED: {
        (SkinTone.LIGHT,): '\U0001f590\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f590\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f590\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f590\U0001f3fe',
        (SkinTone.DARK,): '\U0001f590\U0001f3ff',
    },
    Emoji.RAISED_HAND: {
        (SkinTone.LIGHT,): '\u270b\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\u270b\U0001f3fc',
        (SkinTone.MEDIUM,): '\u270b\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\u270b\U0001f3fe',
        (SkinTone.DARK,): '\u270b\U0001f3ff',
    },
    Emoji.VULCAN_SALUTE: {
        (SkinTone.LIGHT,): '\U0001f596\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f596\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f596\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f596\U0001f3fe',
        (SkinTone.DARK,): '\U0001f596\U0001f3ff',
    },
    Emoji.RIGHTWARDS_HAND: {
        (SkinTone.LIGHT,): '\U0001faf1\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001faf1\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001faf1\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001faf1\U0001f3fe',
        (SkinTone.DARK,): '\U0001faf1\U0001f3ff',
    },
    Emoji.LEFTWARDS_HAND: {
        (SkinTone.LIGHT,): '\U0001faf2\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001faf2\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001faf2\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001faf2\U0001f3fe',
        (SkinTone.DARK,): '\U0001faf2\U0001f3ff',
    },
    Emoji.PALM_DOWN_HAND: {
        (SkinTone.LIGHT,): '\U0001faf3\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001faf3\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001faf3\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001faf3\U0001f3fe',
        (SkinTone.DARK,): '\U0001faf3\U0001f3ff',
    },
    Emoji.PALM_UP_HAND: {
        (SkinTone.LIGHT,): '\U0001faf4\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001faf4\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001faf4\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001faf4\U0001f3fe',
        (SkinTone.DARK,): '\U0001faf4\U0001f3ff',
    },
    Emoji.LEFTWARDS_PUSHING_HAND: {
        (SkinTone.LIGHT,): '\U0001faf7\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001faf7\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001faf7\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001faf7\U0001f3fe',
        (SkinTone.DARK,): '\U0001faf7\U0001f3ff',
    },
    Emoji.RIGHTWARDS_PUSHING_HAND: {
        (SkinTone.LIGHT,): '\U0001faf8\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001faf8\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001faf8\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001faf8\U0001f3fe',
        (SkinTone.DARK,): '\U0001faf8\U0001f3ff',
    },
    Emoji.OK_HAND: {
        (SkinTone.LIGHT,): '\U0001f44c\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f44c\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f44c\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f44c\U0001f3fe',
        (SkinTone.DARK,): '\U0001f44c\U0001f3ff',
    },
    Emoji.PINCHED_FINGERS: {
        (SkinTone.LIGHT,): '\U0001f90c\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f90c\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f90c\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f90c\U0001f3fe',
        (SkinTone.DARK,): '\U0001f90c\U0001f3ff',
    },
    Emoji.PINCHING_HAND: {
        (SkinTone.LIGHT,): '\U0001f90f\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f90f\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f90f\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f90f\U0001f3fe',
        (SkinTone.DARK,): '\U0001f90f\U0001f3ff',
    },
    Emoji.VICTORY_HAND: {
        (SkinTone.LIGHT,): '\u270c\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\u270c\U0001f3fc',
        (SkinTone.MEDIUM,): '\u270c\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\u270c\U0001f3fe',
        (SkinTone.DARK,): '\u270c\U0001f3ff',
    },
    Emoji.CROSSED_FINGERS: {
        (SkinTone.LIGHT,): '\U0001f91e\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f91e\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f91e\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f91e\U0001f3fe',
        (SkinTone.DARK,): '\U0001f91e\U0001f3ff',
    },
    Emoji.HAND_WITH_INDEX_FINGER_AND_THUMB_CROSSED: {
        (SkinTone.LIGHT,): '\U0001faf0\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001faf0\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001faf0\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001faf0\U0001f3fe',
        (SkinTone.DARK,): '\U0001faf0\U0001f3ff',
    },
    Emoji.LOVE_YOU_GESTURE: {
        (SkinTone.LIGHT,): '\U0001f91f\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f91f\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f91f\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f91f\U0001f3fe',
        (SkinTone.DARK,): '\U0001f91f\U0001f3ff',
    },
    Emoji.SIGN_OF_THE_HORNS: {
        (SkinTone.LIGHT,): '\U0001f918\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f918\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f918\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f918\U0001f3fe',
        (SkinTone.DARK,): '\U0001f918\U0001f3ff',
    },
    Emoji.CALL_ME_HAND: {
        (SkinTone.LIGHT,): '\U0001f919\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f919\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f919\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f919\U0001f3fe',
        (SkinTone.DARK,): '\U0001f919\U0001f3ff',
    },
    Emoji.BACKHAND_INDEX_POINTING_LEFT: {
        (SkinTone.LIGHT,): '\U0001f448\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f448\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f448\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f448\U0001f3fe',
        (SkinTone.DARK,): '\U0001f448\U0001f3ff',
    },
    Emoji.BACKHAND_INDEX_POINTING_RIGHT: {
        (SkinTone.LIGHT,): '\U0001f449\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f449\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f449\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f449\U0001f3fe',
        (SkinTone.DARK,): '\U0001f449\U0001f3ff',
    },
    Emoji.BACKHAND_INDEX_POINTING_UP: {
        (SkinTone.LIGHT,): '\U0001f446\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f446\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f446\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f446\U0001f3fe',
        (SkinTone.DARK,): '\U0001f446\U0001f3ff',
    },
    Emoji.MIDDLE_FINGER: {
        (SkinTone.LIGHT,): '\U0001f595\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f595\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f595\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f595\U0001f3fe',
        (SkinTone.DARK,): '\U0001f595\U0001f3ff',
    },
    Emoji.BACKHAND_INDEX_POINTING_DOWN: {
        (SkinTone.LIGHT,): '\U0001f447\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f447\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f447\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f447\U0001f3fe',
        (SkinTone.DARK,): '\U0001f447\U0001f3ff',
    },
    Emoji.INDEX_POINTING_UP: {
        (SkinTone.LIGHT,): '\u261d\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\u261d\U0001f3fc',
        (SkinTone.MEDIUM,): '\u261d\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\u261d\U0001f3fe',
        (SkinTone.DARK,): '\u261d\U0001f3ff',
    },
    Emoji.INDEX_POINTING_AT_THE_VIEWER: {
        (SkinTone.LIGHT,): '\U0001faf5\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001faf5\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001faf5\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001faf5\U0001f3fe',
        (SkinTone.DARK,): '\U0001faf5\U0001f3ff',
    },
    Emoji.THUMBS_UP: {
        (SkinTone.LIGHT,): '\U0001f44d\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f44d\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f44d\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f44d\U0001f3fe',
        (SkinTone.DARK,): '\U0001f44d\U0001f3ff',
    },
    Emoji.THUMBS_DOWN: {
        (SkinTone.LIGHT,): '\U0001f44e\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f44e\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f44e\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f44e\U0001f3fe',
        (SkinTone.DARK,): '\U0001f44e\U0001f3ff',
    },
    Emoji.RAISED_FIST: {
        (SkinTone.LIGHT,): '\u270a\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\u270a\U0001f3fc',
        (SkinTone.MEDIUM,): '\u270a\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\u270a\U0001f3fe',
        (SkinTone.DARK,): '\u270a\U0001f3ff',
    },
    Emoji.ONCOMING_FIST: {
        (SkinTone.LIGHT,): '\U0001f44a\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f44a\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f44a\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f44a\U0001f3fe',
        (SkinTone.DARK,): '\U0001f44a\U0001f3ff',
    },
    Emoji.LEFT_FACING_FIST: {
        (SkinTone.LIGHT,): '\U0001f91b\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f91b\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f91b\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f91b\U0001f3fe',
        (SkinTone.DARK,): '\U0001f91b\U0001f3ff',
    },
    Emoji.RIGHT_FACING_FIST: {
        (SkinTone.LIGHT,): '\U0001f91c\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f91c\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f91c\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f91c\U0001f3fe',
        (SkinTone.DARK,): '\U0001f91c\U0001f3ff',
    },
    Emoji.CLAPPING_HANDS: {
        (SkinTone.LIGHT,): '\U0001f44f\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f44f\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f44f\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f44f\U0001f3fe',
        (SkinTone.DARK,): '\U0001f44f\U0001f3ff',
    },
    Emoji.RAISING_HANDS: {
        (SkinTone.LIGHT,): '\U0001f64c\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f64c\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f64c\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f64c\U0001f3fe',
        (SkinTone.DARK,): '\U0001f64c\U0001f3ff',
    },
    Emoji.HEART_HANDS: {
        (SkinTone.LIGHT,): '\U0001faf6\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001faf6\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001faf6\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001faf6\U0001f3fe',
        (SkinTone.DARK,): '\U0001faf6\U0001f3ff',
    },
    Emoji.OPEN_HANDS: {
        (SkinTone.LIGHT,): '\U0001f450\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f450\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f450\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f450\U0001f3fe',
        (SkinTone.DARK,): '\U0001f450\U0001f3ff',
    },
    Emoji.PALMS_UP_TOGETHER: {
        (SkinTone.LIGHT,): '\U0001f932\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f932\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f932\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f932\U0001f3fe',
        (SkinTone.DARK,): '\U0001f932\U0001f3ff',
    },
    Emoji.HANDSHAKE: {
        (SkinTone.LIGHT,): '\U0001f91d\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f91d\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f91d\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f91d\U0001f3fe',
        (SkinTone.DARK,): '\U0001f91d\U0001f3ff',
        (SkinTone.LIGHT, SkinTone.MEDIUM_LIGHT): '\U0001faf1\U0001f3fb\u200d\U0001faf2\U0001f3fc',
        (SkinTone.LIGHT, SkinTone.MEDIUM): '\U0001faf1\U0001f3fb\u200d\U0001faf2\U0001f3fd',
        (SkinTone.LIGHT, SkinTone.MEDIUM_DARK): '\U0001faf1\U0001f3fb\u200d\U0001faf2\U0001f3fe',
        (SkinTone.LIGHT, SkinTone.DARK): '\U0001faf1\U0001f3fb\u200d\U0001faf2\U0001f3ff',
        (SkinTone.MEDIUM_LIGHT, SkinTone.LIGHT): '\U0001faf1\U0001f3fc\u200d\U0001faf2\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM): '\U0001faf1\U0001f3fc\u200d\U0001faf2\U0001f3fd',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM_DARK): '\U0001faf1\U0001f3fc\u200d\U0001faf2\U0001f3fe',
        (SkinTone.MEDIUM_LIGHT, SkinTone.DARK): '\U0001faf1\U0001f3fc\u200d\U0001faf2\U0001f3ff',
        (SkinTone.MEDIUM, SkinTone.LIGHT): '\U0001faf1\U0001f3fd\u200d\U0001faf2\U0001f3fb',
        (SkinTone.MEDIUM, SkinTone.MEDIUM_LIGHT): '\U0001faf1\U0001f3fd\u200d\U0001faf2\U0001f3fc',
        (SkinTone.MEDIUM, SkinTone.MEDIUM_DARK): '\U0001faf1\U0001f3fd\u200d\U0001faf2\U0001f3fe',
        (SkinTone.MEDIUM, SkinTone.DARK): '\U0001faf1\U0001f3fd\u200d\U0001faf2\U0001f3ff',
        (SkinTone.MEDIUM_DARK, SkinTone.LIGHT): '\U0001faf1\U0001f3fe\u200d\U0001faf2\U0001f3fb',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM_LIGHT): '\U0001faf1\U0001f3fe\u200d\U0001faf2\U0001f3fc',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM): '\U0001faf1\U0001f3fe\u200d\U0001faf2\U0001f3fd',
        (SkinTone.MEDIUM_DARK, SkinTone.DARK): '\U0001faf1\U0001f3fe\u200d\U0001faf2\U0001f3ff',
        (SkinTone.DARK, SkinTone.LIGHT): '\U0001faf1\U0001f3ff\u200d\U0001faf2\U0001f3fb',
        (SkinTone.DARK, SkinTone.MEDIUM_LIGHT): '\U0001faf1\U0001f3ff\u200d\U0001faf2\U0001f3fc',
        (SkinTone.DARK, SkinTone.MEDIUM): '\U0001faf1\U0001f3ff\u200d\U0001faf2\U0001f3fd',
        (SkinTone.DARK, SkinTone.MEDIUM_DARK): '\U0001faf1\U0001f3ff\u200d\U0001faf2\U0001f3fe',
    },
    Emoji.FOLDED_HANDS: {
        (SkinTone.LIGHT,): '\U0001f64f\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f64f\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f64f\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f64f\U0001f3fe',
        (SkinTone.DARK,): '\U0001f64f\U0001f3ff',
    },
    Emoji.WRITING_HAND: {
        (SkinTone.LIGHT,): '\u270d\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\u270d\U0001f3fc',
        (SkinTone.MEDIUM,): '\u270d\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\u270d\U0001f3fe',
        (SkinTone.DARK,): '\u270d\U0001f3ff',
    },
    Emoji.NAIL_POLISH: {
        (SkinTone.LIGHT,): '\U0001f485\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f485\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f485\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f485\U0001f3fe',
        (SkinTone.DARK,): '\U0001f485\U0001f3ff',
    },
    Emoji.SELFIE: {
        (SkinTone.LIGHT,): '\U0001f933\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f933\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f933\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f933\U0001f3fe',
        (SkinTone.DARK,): '\U0001f933\U0001f3ff',
    },
    Emoji.FLEXED_BICEPS: {
        (SkinTone.LIGHT,): '\U0001f4aa\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f4aa\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f4aa\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f4aa\U0001f3fe',
        (SkinTone.DARK,): '\U0001f4aa\U0001f3ff',
    },
    Emoji.LEG: {
        (SkinTone.LIGHT,): '\U0001f9b5\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9b5\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f9b5\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f9b5\U0001f3fe',
        (SkinTone.DARK,): '\U0001f9b5\U0001f3ff',
    },
    Emoji.FOOT: {
        (SkinTone.LIGHT,): '\U0001f9b6\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9b6\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f9b6\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f9b6\U0001f3fe',
        (SkinTone.DARK,): '\U0001f9b6\U0001f3ff',
    },
    Emoji.EAR: {
        (SkinTone.LIGHT,): '\U0001f442\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f442\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f442\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f442\U0001f3fe',
        (SkinTone.DARK,): '\U0001f442\U0001f3ff',
    },
    Emoji.EAR_WITH_HEARING_AID: {
        (SkinTone.LIGHT,): '\U0001f9bb\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9bb\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f9bb\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f9bb\U0001f3fe',
        (SkinTone.DARK,): '\U0001f9bb\U0001f3ff',
    },
    Emoji.NOSE: {
        (SkinTone.LIGHT,): '\U0001f443\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f443\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f443\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f443\U0001f3fe',
        (SkinTone.DARK,): '\U0001f443\U0001f3ff',
    },
    Emoji.BABY: {
        (SkinTone.LIGHT,): '\U0001f476\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f476\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f476\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f476\U0001f3fe',
        (SkinTone.DARK,): '\U0001f476\U0001f3ff',
    },
    Emoji.CHILD: {
        (SkinTone.LIGHT,): '\U0001f9d2\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d2\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f9d2\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d2\U0001f3fe',
        (SkinTone.DARK,): '\U0001f9d2\U0001f3ff',
    },
    Emoji.BOY: {
        (SkinTone.LIGHT,): '\U0001f466\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f466\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f466\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f466\U0001f3fe',
        (SkinTone.DARK,): '\U0001f466\U0001f3ff',
    },
    Emoji.GIRL: {
        (SkinTone.LIGHT,): '\U0001f467\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f467\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f467\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f467\U0001f3fe',
        (SkinTone.DARK,): '\U0001f467\U0001f3ff',
    },
    Emoji.PERSON: {
        (SkinTone.LIGHT,): '\U0001f9d1\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d1\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f9d1\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d1\U0001f3fe',
        (SkinTone.DARK,): '\U0001f9d1\U0001f3ff',
    },
    Emoji.PERSON_BLOND_HAIR: {
        (SkinTone.LIGHT,): '\U0001f471\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f471\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f471\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f471\U0001f3fe',
        (SkinTone.DARK,): '\U0001f471\U0001f3ff',
    },
    Emoji.MAN: {
        (SkinTone.LIGHT,): '\U0001f468\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f468\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f468\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f468\U0001f3fe',
        (SkinTone.DARK,): '\U0001f468\U0001f3ff',
    },
    Emoji.PERSON_BEARD: {
        (SkinTone.LIGHT,): '\U0001f9d4\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d4\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f9d4\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d4\U0001f3fe',
        (SkinTone.DARK,): '\U0001f9d4\U0001f3ff',
    },
    Emoji.MAN_BEARD: {
        (SkinTone.LIGHT,): '\U0001f9d4\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d4\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9d4\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d4\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f9d4\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_BEARD: {
        (SkinTone.LIGHT,): '\U0001f9d4\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d4\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9d4\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d4\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f9d4\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.MAN_RED_HAIR: {
        (SkinTone.LIGHT,): '\U0001f468\U0001f3fb\u200d\U0001f9b0',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f468\U0001f3fc\u200d\U0001f9b0',
        (SkinTone.MEDIUM,): '\U0001f468\U0001f3fd\u200d\U0001f9b0',
        (SkinTone.MEDIUM_DARK,): '\U0001f468\U0001f3fe\u200d\U0001f9b0',
        (SkinTone.DARK,): '\U0001f468\U0001f3ff\u200d\U0001f9b0',
    },
    Emoji.MAN_CURLY_HAIR: {
        (SkinTone.LIGHT,): '\U0001f468\U0001f3fb\u200d\U0001f9b1',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f468\U0001f3fc\u200d\U0001f9b1',
        (SkinTone.MEDIUM,): '\U0001f468\U0001f3fd\u200d\U0001f9b1',
        (SkinTone.MEDIUM_DARK,): '\U0001f468\U0001f3fe\u200d\U0001f9b1',
        (SkinTone.DARK,): '\U0001f468\U0001f3ff\u200d\U0001f9b1',
    },
    Emoji.MAN_WHITE_HAIR: {
        (SkinTone.LIGHT,): '\U0001f468\U0001f3fb\u200d\U0001f9b3',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f468\U0001f3fc\u200d\U0001f9b3',
        (SkinTone.MEDIUM,): '\U0001f468\U0001f3fd\u200d\U0001f9b3',
        (SkinTone.MEDIUM_DARK,): '\U0001f468\U0001f3fe\u200d\U0001f9b3',
        (SkinTone.DARK,): '\U0001f468\U0001f3ff\u200d\U0001f9b3',
    },
    Emoji.MAN_BALD: {
        (SkinTone.LIGHT,): '\U0001f468\U0001f3fb\u200d\U0001f9b2',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f468\U0001f3fc\u200d\U0001f9b2',
        (SkinTone.MEDIUM,): '\U0001f468\U0001f3fd\u200d\U0001f9b2',
        (SkinTone.MEDIUM_DARK,): '\U0001f468\U0001f3fe\u200d\U0001f9b2',
        (SkinTone.DARK,): '\U0001f468\U0001f3ff\u200d\U0001f9b2',
    },
    Emoji.WOMAN: {
        (SkinTone.LIGHT,): '\U0001f469\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f469\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f469\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f469\U0001f3fe',
        (SkinTone.DARK,): '\U0001f469\U0001f3ff',
    },
    Emoji.WOMAN_RED_HAIR: {
        (SkinTone.LIGHT,): '\U0001f469\U0001f3fb\u200d\U0001f9b0',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f469\U0001f3fc\u200d\U0001f9b0',
        (SkinTone.MEDIUM,): '\U0001f469\U0001f3fd\u200d\U0001f9b0',
        (SkinTone.MEDIUM_DARK,): '\U0001f469\U0001f3fe\u200d\U0001f9b0',
        (SkinTone.DARK,): '\U0001f469\U0001f3ff\u200d\U0001f9b0',
    },
    Emoji.PERSON_RED_HAIR: {
        (SkinTone.LIGHT,): '\U0001f9d1\U0001f3fb\u200d\U0001f9b0',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d1\U0001f3fc\u200d\U0001f9b0',
        (SkinTone.MEDIUM,): '\U0001f9d1\U0001f3fd\u200d\U0001f9b0',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d1\U0001f3fe\u200d\U0001f9b0',
        (SkinTone.DARK,): '\U0001f9d1\U0001f3ff\u200d\U0001f9b0',
    },
    Emoji.WOMAN_CURLY_HAIR: {
        (SkinTone.LIGHT,): '\U0001f469\U0001f3fb\u200d\U0001f9b1',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f469\U0001f3fc\u200d\U0001f9b1',
        (SkinTone.MEDIUM,): '\U0001f469\U0001f3fd\u200d\U0001f9b1',
        (SkinTone.MEDIUM_DARK,): '\U0001f469\U0001f3fe\u200d\U0001f9b1',
        (SkinTone.DARK,): '\U0001f469\U0001f3ff\u200d\U0001f9b1',
    },
    Emoji.PERSON_CURLY_HAIR: {
        (SkinTone.LIGHT,): '\U0001f9d1\U0001f3fb\u200d\U0001f9b1',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d1\U0001f3fc\u200d\U0001f9b1',
        (SkinTone.MEDIUM,): '\U0001f9d1\U0001f3fd\u200d\U0001f9b1',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d1\U0001f3fe\u200d\U0001f9b1',
        (SkinTone.DARK,): '\U0001f9d1\U0001f3ff\u200d\U0001f9b1',
    },
    Emoji.WOMAN_WHITE_HAIR: {
        (SkinTone.LIGHT,): '\U0001f469\U0001f3fb\u200d\U0001f9b3',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f469\U0001f3fc\u200d\U0001f9b3',
        (SkinTone.MEDIUM,): '\U0001f469\U0001f3fd\u200d\U0001f9b3',
        (SkinTone.MEDIUM_DARK,): '\U0001f469\U0001f3fe\u200d\U0001f9b3',
        (SkinTone.DARK,): '\U0001f469\U0001f3ff\u200d\U0001f9b3',
    },
    Emoji.PERSON_WHITE_HAIR: {
        (SkinTone.LIGHT,): '\U0001f9d1\U0001f3fb\u200d\U0001f9b3',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d1\U0001f3fc\u200d\U0001f9b3',
        (SkinTone.MEDIUM,): '\U0001f9d1\U0001f3fd\u200d\U0001f9b3',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d1\U0001f3fe\u200d\U0001f9b3',
        (SkinTone.DARK,): '\U0001f9d1\U0001f3ff\u200d\U0001f9b3',
    },
    Emoji.WOMAN_BALD: {
        (SkinTone.LIGHT,): '\U0001f469\U0001f3fb\u200d\U0001f9b2',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f469\U0001f3fc\u200d\U0001f9b2',
        (SkinTone.MEDIUM,): '\U0001f469\U0001f3fd\u200d\U0001f9b2',
        (SkinTone.MEDIUM_DARK,): '\U0001f469\U0001f3fe\u200d\U0001f9b2',
        (SkinTone.DARK,): '\U0001f469\U0001f3ff\u200d\U0001f9b2',
    },
    Emoji.PERSON_BALD: {
        (SkinTone.LIGHT,): '\U0001f9d1\U0001f3fb\u200d\U0001f9b2',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d1\U0001f3fc\u200d\U0001f9b2',
        (SkinTone.MEDIUM,): '\U0001f9d1\U0001f3fd\u200d\U0001f9b2',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d1\U0001f3fe\u200d\U0001f9b2',
        (SkinTone.DARK,): '\U0001f9d1\U0001f3ff\u200d\U0001f9b2',
    },
    Emoji.WOMAN_BLOND_HAIR: {
        (SkinTone.LIGHT,): '\U0001f471\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f471\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f471\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f471\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f471\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.MAN_BLOND_HAIR: {
        (SkinTone.LIGHT,): '\U0001f471\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f471\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f471\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f471\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f471\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.OLDER_PERSON: {
        (SkinTone.LIGHT,): '\U0001f9d3\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d3\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f9d3\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d3\U0001f3fe',
        (SkinTone.DARK,): '\U0001f9d3\U0001f3ff',
    },
    Emoji.OLD_MAN: {
        (SkinTone.LIGHT,): '\U0001f474\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f474\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f474\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f474\U0001f3fe',
        (SkinTone.DARK,): '\U0001f474\U0001f3ff',
    },
    Emoji.OLD_WOMAN: {
        (SkinTone.LIGHT,): '\U0001f475\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f475\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f475\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f475\U0001f3fe',
        (SkinTone.DARK,): '\U0001f475\U0001f3ff',
    },
    Emoji.PERSON_FROWNING: {
        (SkinTone.LIGHT,): '\U0001f64d\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f64d\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f64d\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f64d\U0001f3fe',
        (SkinTone.DARK,): '\U0001f64d\U0001f3ff',
    },
    Emoji.MAN_FROWNING: {
        (SkinTone.LIGHT,): '\U0001f64d\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f64d\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f64d\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f64d\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f64d\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_FROWNING: {
        (SkinTone.LIGHT,): '\U0001f64d\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f64d\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f64d\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f64d\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f64d\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_POUTING: {
        (SkinTone.LIGHT,): '\U0001f64e\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f64e\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f64e\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f64e\U0001f3fe',
        (SkinTone.DARK,): '\U0001f64e\U0001f3ff',
    },
    Emoji.MAN_POUTING: {
        (SkinTone.LIGHT,): '\U0001f64e\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f64e\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f64e\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f64e\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f64e\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_POUTING: {
        (SkinTone.LIGHT,): '\U0001f64e\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f64e\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f64e\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f64e\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f64e\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_GESTURING_NO: {
        (SkinTone.LIGHT,): '\U0001f645\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f645\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f645\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f645\U0001f3fe',
        (SkinTone.DARK,): '\U0001f645\U0001f3ff',
    },
    Emoji.MAN_GESTURING_NO: {
        (SkinTone.LIGHT,): '\U0001f645\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f645\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f645\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f645\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f645\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_GESTURING_NO: {
        (SkinTone.LIGHT,): '\U0001f645\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f645\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f645\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f645\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f645\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_GESTURING_OK: {
        (SkinTone.LIGHT,): '\U0001f646\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f646\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f646\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f646\U0001f3fe',
        (SkinTone.DARK,): '\U0001f646\U0001f3ff',
    },
    Emoji.MAN_GESTURING_OK: {
        (SkinTone.LIGHT,): '\U0001f646\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f646\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f646\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f646\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f646\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_GESTURING_OK: {
        (SkinTone.LIGHT,): '\U0001f646\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f646\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f646\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f646\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f646\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_TIPPING_HAND: {
        (SkinTone.LIGHT,): '\U0001f481\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f481\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f481\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f481\U0001f3fe',
        (SkinTone.DARK,): '\U0001f481\U0001f3ff',
    },
    Emoji.MAN_TIPPING_HAND: {
        (SkinTone.LIGHT,): '\U0001f481\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f481\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f481\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f481\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f481\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_TIPPING_HAND: {
        (SkinTone.LIGHT,): '\U0001f481\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f481\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f481\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f481\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f481\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_RAISING_HAND: {
        (SkinTone.LIGHT,): '\U0001f64b\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f64b\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f64b\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f64b\U0001f3fe',
        (SkinTone.DARK,): '\U0001f64b\U0001f3ff',
    },
    Emoji.MAN_RAISING_HAND: {
        (SkinTone.LIGHT,): '\U0001f64b\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f64b\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f64b\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f64b\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f64b\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_RAISING_HAND: {
        (SkinTone.LIGHT,): '\U0001f64b\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f64b\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f64b\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f64b\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f64b\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.DEAF_PERSON: {
        (SkinTone.LIGHT,): '\U0001f9cf\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9cf\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f9cf\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f9cf\U0001f3fe',
        (SkinTone.DARK,): '\U0001f9cf\U0001f3ff',
    },
    Emoji.DEAF_MAN: {
        (SkinTone.LIGHT,): '\U0001f9cf\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9cf\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9cf\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9cf\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f9cf\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.DEAF_WOMAN: {
        (SkinTone.LIGHT,): '\U0001f9cf\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9cf\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9cf\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9cf\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f9cf\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_BOWING: {
        (SkinTone.LIGHT,): '\U0001f647\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f647\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f647\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f647\U0001f3fe',
        (SkinTone.DARK,): '\U0001f647\U0001f3ff',
    },
    Emoji.MAN_BOWING: {
        (SkinTone.LIGHT,): '\U0001f647\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f647\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f647\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f647\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f647\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_BOWING: {
        (SkinTone.LIGHT,): '\U0001f647\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f647\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f647\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f647\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f647\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_FACEPALMING: {
        (SkinTone.LIGHT,): '\U0001f926\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f926\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f926\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f926\U0001f3fe',
        (SkinTone.DARK,): '\U0001f926\U0001f3ff',
    },
    Emoji.MAN_FACEPALMING: {
        (SkinTone.LIGHT,): '\U0001f926\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f926\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f926\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f926\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f926\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_FACEPALMING: {
        (SkinTone.LIGHT,): '\U0001f926\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f926\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f926\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f926\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f926\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_SHRUGGING: {
        (SkinTone.LIGHT,): '\U0001f937\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f937\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f937\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f937\U0001f3fe',
        (SkinTone.DARK,): '\U0001f937\U0001f3ff',
    },
    Emoji.MAN_SHRUGGING: {
        (SkinTone.LIGHT,): '\U0001f937\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f937\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f937\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f937\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f937\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_SHRUGGING: {
        (SkinTone.LIGHT,): '\U0001f937\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f937\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f937\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f937\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f937\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.HEALTH_WORKER: {
        (SkinTone.LIGHT,): '\U0001f9d1\U0001f3fb\u200d\u2695\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d1\U0001f3fc\u200d\u2695\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9d1\U0001f3fd\u200d\u2695\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d1\U0001f3fe\u200d\u2695\ufe0f',
        (SkinTone.DARK,): '\U0001f9d1\U0001f3ff\u200d\u2695\ufe0f',
    },
    Emoji.MAN_HEALTH_WORKER: {
        (SkinTone.LIGHT,): '\U0001f468\U0001f3fb\u200d\u2695\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f468\U0001f3fc\u200d\u2695\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f468\U0001f3fd\u200d\u2695\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f468\U0001f3fe\u200d\u2695\ufe0f',
        (SkinTone.DARK,): '\U0001f468\U0001f3ff\u200d\u2695\ufe0f',
    },
    Emoji.WOMAN_HEALTH_WORKER: {
        (SkinTone.LIGHT,): '\U0001f469\U0001f3fb\u200d\u2695\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f469\U0001f3fc\u200d\u2695\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f469\U0001f3fd\u200d\u2695\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f469\U0001f3fe\u200d\u2695\ufe0f',
        (SkinTone.DARK,): '\U0001f469\U0001f3ff\u200d\u2695\ufe0f',
    },
    Emoji.STUDENT: {
        (SkinTone.LIGHT,): '\U0001f9d1\U0001f3fb\u200d\U0001f393',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d1\U0001f3fc\u200d\U0001f393',
        (SkinTone.MEDIUM,): '\U0001f9d1\U0001f3fd\u200d\U0001f393',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d1\U0001f3fe\u200d\U0001f393',
        (SkinTone.DARK,): '\U0001f9d1\U0001f3ff\u200d\U0001f393',
    },
    Emoji.MAN_STUDENT: {
        (SkinTone.LIGHT,): '\U0001f468\U0001f3fb\u200d\U0001f393',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f468\U0001f3fc\u200d\U0001f393',
        (SkinTone.MEDIUM,): '\U0001f468\U0001f3fd\u200d\U0001f393',
        (SkinTone.MEDIUM_DARK,): '\U0001f468\U0001f3fe\u200d\U0001f393',
        (SkinTone.DARK,): '\U0001f468\U0001f3ff\u200d\U0001f393',
    },
    Emoji.WOMAN_STUDENT: {
        (SkinTone.LIGHT,): '\U0001f469\U0001f3fb\u200d\U0001f393',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f469\U0001f3fc\u200d\U0001f393',
        (SkinTone.MEDIUM,): '\U0001f469\U0001f3fd\u200d\U0001f393',
        (SkinTone.MEDIUM_DARK,): '\U0001f469\U0001f3fe\u200d\U0001f393',
        (SkinTone.DARK,): '\U0001f469\U0001f3ff\u200d\U0001f393',
    },
    Emoji.TEACHER: {
        (SkinTone.LIGHT,): '\U0001f9d1\U0001f3fb\u200d\U0001f3eb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d1\U0001f3fc\u200d\U0001f3eb',
        (SkinTone.MEDIUM,): '\U0001f9d1\U0001f3fd\u200d\U0001f3eb',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d1\U0001f3fe\u200d\U0001f3eb',
        (SkinTone.DARK,): '\U0001f9d1\U0001f3ff\u200d\U0001f3eb',
    },
    Emoji.MAN_TEACHER: {
        (SkinTone.LIGHT,): '\U0001f468\U0001f3fb\u200d\U0001f3eb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f468\U0001f3fc\u200d\U0001f3eb',
        (SkinTone.MEDIUM,): '\U0001f468\U0001f3fd\u200d\U0001f3eb',
        (SkinTone.MEDIUM_DARK,): '\U0001f468\U0001f3fe\u200d\U0001f3eb',
        (SkinTone.DARK,): '\U0001f468\U0001f3ff\u200d\U0001f3eb',
    },
    Emoji.WOMAN_TEACHER: {
        (SkinTone.LIGHT,): '\U0001f469\U0001f3fb\u200d\U0001f3eb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f469\U0001f3fc\u200d\U0001f3eb',
        (SkinTone.MEDIUM,): '\U0001f469\U0001f3fd\u200d\U0001f3eb',
        (SkinTone.MEDIUM_DARK,): '\U0001f469\U0001f3fe\u200d\U0001f3eb',
        (SkinTone.DARK,): '\U0001f469\U0001f3ff\u200d\U0001f3eb',
    },
    Emoji.JUDGE: {
        (SkinTone.LIGHT,): '\U0001f9d1\U0001f3fb\u200d\u2696\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d1\U0001f3fc\u200d\u2696\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9d1\U0001f3fd\u200d\u2696\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d1\U0001f3fe\u200d\u2696\ufe0f',
        (SkinTone.DARK,): '\U0001f9d1\U0001f3ff\u200d\u2696\ufe0f',
    },
    Emoji.MAN_JUDGE: {
        (SkinTone.LIGHT,): '\U0001f468\U0001f3fb\u200d\u2696\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f468\U0001f3fc\u200d\u2696\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f468\U0001f3fd\u200d\u2696\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f468\U0001f3fe\u200d\u2696\ufe0f',
        (SkinTone.DARK,): '\U0001f468\U0001f3ff\u200d\u2696\ufe0f',
    },
    Emoji.WOMAN_JUDGE: {
        (SkinTone.LIGHT,): '\U0001f469\U0001f3fb\u200d\u2696\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f469\U0001f3fc\u200d\u2696\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f469\U0001f3fd\u200d\u2696\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f469\U0001f3fe\u200d\u2696\ufe0f',
        (SkinTone.DARK,): '\U0001f469\U0001f3ff\u200d\u2696\ufe0f',
    },
    Emoji.FARMER: {
        (SkinTone.LIGHT,): '\U0001f9d1\U0001f3fb\u200d\U0001f33e',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d1\U0001f3fc\u200d\U0001f33e',
        (SkinTone.MEDIUM,): '\U0001f9d1\U0001f3fd\u200d\U0001f33e',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d1\U0001f3fe\u200d\U0001f33e',
        (SkinTone.DARK,): '\U0001f9d1\U0001f3ff\u200d\U0001f33e',
    },
    Emoji.MAN_FARMER: {
        (SkinTone.LIGHT,): '\U0001f468\U0001f3fb\u200d\U0001f33e',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f468\U0001f3fc\u200d\U0001f33e',
        (SkinTone.MEDIUM,): '\U0001f468\U0001f3fd\u200d\U0001f33e',
        (SkinTone.MEDIUM_DARK,): '\U0001f468\U0001f3fe\u200d\U0001f33e',
        (SkinTone.DARK,): '\U0001f468\U0001f3ff\u200d\U0001f33e',
    },
    Emoji.WOMAN_FARMER: {
        (SkinTone.LIGHT,): '\U0001f469\U0001f3fb\u200d\U0001f33e',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f469\U0001f3fc\u200d\U0001f33e',
        (SkinTone.MEDIUM,): '\U0001f469\U0001f3fd\u200d\U0001f33e',
        (SkinTone.MEDIUM_DARK,): '\U0001f469\U0001f3fe\u200d\U0001f33e',
        (SkinTone.DARK,): '\U0001f469\U0001f3ff\u200d\U0001f33e',
    },
    Emoji.COOK: {
        (SkinTone.LIGHT,): '\U0001f9d1\U0001f3fb\u200d\U0001f373',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d1\U0001f3fc\u200d\U0001f373',
        (SkinTone.MEDIUM,): '\U0001f9d1\U0001f3fd\u200d\U0001f373',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d1\U0001f3fe\u200d\U0001f373',
        (SkinTone.DARK,): '\U0001f9d1\U0001f3ff\u200d\U0001f373',
    },
    Emoji.MAN_COOK: {
        (SkinTone.LIGHT,): '\U0001f468\U0001f3fb\u200d\U0001f373',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f468\U0001f3fc\u200d\U0001f373',
        (SkinTone.MEDIUM,): '\U0001f468\U0001f3fd\u200d\U0001f373',
        (SkinTone.MEDIUM_DARK,): '\U0001f468\U0001f3fe\u200d\U0001f373',
        (SkinTone.DARK,): '\U0001f468\U0001f3ff\u200d\U0001f373',
    },
    Emoji.WOMAN_COOK: {
        (SkinTone.LIGHT,): '\U0001f469\U0001f3fb\u200d\U0001f373',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f469\U0001f3fc\u200d\U0001f373',
        (SkinTone.MEDIUM,): '\U0001f469\U0001f3fd\u200d\U0001f373',
        (SkinTone.MEDIUM_DARK,): '\U0001f469\U0001f3fe\u200d\U0001f373',
        (SkinTone.DARK,): '\U0001f469\U0001f3ff\u200d\U0001f373',
    },
    Emoji.MECHANIC: {
        (SkinTone.LIGHT,): '\U0001f9d1\U0001f3fb\u200d\U0001f527',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d1\U0001f3fc\u200d\U0001f527',
        (SkinTone.MEDIUM,): '\U0001f9d1\U0001f3fd\u200d\U0001f527',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d1\U0001f3fe\u200d\U0001f527',
        (SkinTone.DARK,): '\U0001f9d1\U0001f3ff\u200d\U0001f527',
    },
    Emoji.MAN_MECHANIC: {
        (SkinTone.LIGHT,): '\U0001f468\U0001f3fb\u200d\U0001f527',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f468\U0001f3fc\u200d\U0001f527',
        (SkinTone.MEDIUM,): '\U0001f468\U0001f3fd\u200d\U0001f527',
        (SkinTone.MEDIUM_DARK,): '\U0001f468\U0001f3fe\u200d\U0001f527',
        (SkinTone.DARK,): '\U0001f468\U0001f3ff\u200d\U0001f527',
    },
    Emoji.WOMAN_MECHANIC: {
        (SkinTone.LIGHT,): '\U0001f469\U0001f3fb\u200d\U0001f527',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f469\U0001f3fc\u200d\U0001f527',
        (SkinTone.MEDIUM,): '\U0001f469\U0001f3fd\u200d\U0001f527',
        (SkinTone.MEDIUM_DARK,): '\U0001f469\U0001f3fe\u200d\U0001f527',
        (SkinTone.DARK,): '\U0001f469\U0001f3ff\u200d\U0001f527',
    },
    Emoji.FACTORY_WORKER: {
        (SkinTone.LIGHT,): '\U0001f9d1\U0001f3fb\u200d\U0001f3ed',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d1\U0001f3fc\u200d\U0001f3ed',
        (SkinTone.MEDIUM,): '\U0001f9d1\U0001f3fd\u200d\U0001f3ed',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d1\U0001f3fe\u200d\U0001f3ed',
        (SkinTone.DARK,): '\U0001f9d1\U0001f3ff\u200d\U0001f3ed',
    },
    Emoji.MAN_FACTORY_WORKER: {
        (SkinTone.LIGHT,): '\U0001f468\U0001f3fb\u200d\U0001f3ed',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f468\U0001f3fc\u200d\U0001f3ed',
        (SkinTone.MEDIUM,): '\U0001f468\U0001f3fd\u200d\U0001f3ed',
        (SkinTone.MEDIUM_DARK,): '\U0001f468\U0001f3fe\u200d\U0001f3ed',
        (SkinTone.DARK,): '\U0001f468\U0001f3ff\u200d\U0001f3ed',
    },
    Emoji.WOMAN_FACTORY_WORKER: {
        (SkinTone.LIGHT,): '\U0001f469\U0001f3fb\u200d\U0001f3ed',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f469\U0001f3fc\u200d\U0001f3ed',
        (SkinTone.MEDIUM,): '\U0001f469\U0001f3fd\u200d\U0001f3ed',
        (SkinTone.MEDIUM_DARK,): '\U0001f469\U0001f3fe\u200d\U0001f3ed',
        (SkinTone.DARK,): '\U0001f469\U0001f3ff\u200d\U0001f3ed',
    },
    Emoji.OFFICE_WORKER: {
        (SkinTone.LIGHT,): '\U0001f9d1\U0001f3fb\u200d\U0001f4bc',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d1\U0001f3fc\u200d\U0001f4bc',
        (SkinTone.MEDIUM,): '\U0001f9d1\U0001f3fd\u200d\U0001f4bc',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d1\U0001f3fe\u200d\U0001f4bc',
        (SkinTone.DARK,): '\U0001f9d1\U0001f3ff\u200d\U0001f4bc',
    },
    Emoji.MAN_OFFICE_WORKER: {
        (SkinTone.LIGHT,): '\U0001f468\U0001f3fb\u200d\U0001f4bc',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f468\U0001f3fc\u200d\U0001f4bc',
        (SkinTone.MEDIUM,): '\U0001f468\U0001f3fd\u200d\U0001f4bc',
        (SkinTone.MEDIUM_DARK,): '\U0001f468\U0001f3fe\u200d\U0001f4bc',
        (SkinTone.DARK,): '\U0001f468\U0001f3ff\u200d\U0001f4bc',
    },
    Emoji.WOMAN_OFFICE_WORKER: {
        (SkinTone.LIGHT,): '\U0001f469\U0001f3fb\u200d\U0001f4bc',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f469\U0001f3fc\u200d\U0001f4bc',
        (SkinTone.MEDIUM,): '\U0001f469\U0001f3fd\u200d\U0001f4bc',
        (SkinTone.MEDIUM_DARK,): '\U0001f469\U0001f3fe\u200d\U0001f4bc',
        (SkinTone.DARK,): '\U0001f469\U0001f3ff\u200d\U0001f4bc',
    },
    Emoji.SCIENTIST: {
        (SkinTone.LIGHT,): '\U0001f9d1\U0001f3fb\u200d\U0001f52c',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d1\U0001f3fc\u200d\U0001f52c',
        (SkinTone.MEDIUM,): '\U0001f9d1\U0001f3fd\u200d\U0001f52c',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d1\U0001f3fe\u200d\U0001f52c',
        (SkinTone.DARK,): '\U0001f9d1\U0001f3ff\u200d\U0001f52c',
    },
    Emoji.MAN_SCIENTIST: {
        (SkinTone.LIGHT,): '\U0001f468\U0001f3fb\u200d\U0001f52c',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f468\U0001f3fc\u200d\U0001f52c',
        (SkinTone.MEDIUM,): '\U0001f468\U0001f3fd\u200d\U0001f52c',
        (SkinTone.MEDIUM_DARK,): '\U0001f468\U0001f3fe\u200d\U0001f52c',
        (SkinTone.DARK,): '\U0001f468\U0001f3ff\u200d\U0001f52c',
    },
    Emoji.WOMAN_SCIENTIST: {
        (SkinTone.LIGHT,): '\U0001f469\U0001f3fb\u200d\U0001f52c',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f469\U0001f3fc\u200d\U0001f52c',
        (SkinTone.MEDIUM,): '\U0001f469\U0001f3fd\u200d\U0001f52c',
        (SkinTone.MEDIUM_DARK,): '\U0001f469\U0001f3fe\u200d\U0001f52c',
        (SkinTone.DARK,): '\U0001f469\U0001f3ff\u200d\U0001f52c',
    },
    Emoji.TECHNOLOGIST: {
        (SkinTone.LIGHT,): '\U0001f9d1\U0001f3fb\u200d\U0001f4bb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d1\U0001f3fc\u200d\U0001f4bb',
        (SkinTone.MEDIUM,): '\U0001f9d1\U0001f3fd\u200d\U0001f4bb',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d1\U0001f3fe\u200d\U0001f4bb',
        (SkinTone.DARK,): '\U0001f9d1\U0001f3ff\u200d\U0001f4bb',
    },
    Emoji.MAN_TECHNOLOGIST: {
        (SkinTone.LIGHT,): '\U0001f468\U0001f3fb\u200d\U0001f4bb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f468\U0001f3fc\u200d\U0001f4bb',
        (SkinTone.MEDIUM,): '\U0001f468\U0001f3fd\u200d\U0001f4bb',
        (SkinTone.MEDIUM_DARK,): '\U0001f468\U0001f3fe\u200d\U0001f4bb',
        (SkinTone.DARK,): '\U0001f468\U0001f3ff\u200d\U0001f4bb',
    },
    Emoji.WOMAN_TECHNOLOGIST: {
        (SkinTone.LIGHT,): '\U0001f469\U0001f3fb\u200d\U0001f4bb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f469\U0001f3fc\u200d\U0001f4bb',
        (SkinTone.MEDIUM,): '\U0001f469\U0001f3fd\u200d\U0001f4bb',
        (SkinTone.MEDIUM_DARK,): '\U0001f469\U0001f3fe\u200d\U0001f4bb',
        (SkinTone.DARK,): '\U0001f469\U0001f3ff\u200d\U0001f4bb',
    },
    Emoji.SINGER: {
        (SkinTone.LIGHT,): '\U0001f9d1\U0001f3fb\u200d\U0001f3a4',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d1\U0001f3fc\u200d\U0001f3a4',
        (SkinTone.MEDIUM,): '\U0001f9d1\U0001f3fd\u200d\U0001f3a4',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d1\U0001f3fe\u200d\U0001f3a4',
        (SkinTone.DARK,): '\U0001f9d1\U0001f3ff\u200d\U0001f3a4',
    },
    Emoji.MAN_SINGER: {
        (SkinTone.LIGHT,): '\U0001f468\U0001f3fb\u200d\U0001f3a4',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f468\U0001f3fc\u200d\U0001f3a4',
        (SkinTone.MEDIUM,): '\U0001f468\U0001f3fd\u200d\U0001f3a4',
        (SkinTone.MEDIUM_DARK,): '\U0001f468\U0001f3fe\u200d\U0001f3a4',
        (SkinTone.DARK,): '\U0001f468\U0001f3ff\u200d\U0001f3a4',
    },
    Emoji.WOMAN_SINGER: {
        (SkinTone.LIGHT,): '\U0001f469\U0001f3fb\u200d\U0001f3a4',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f469\U0001f3fc\u200d\U0001f3a4',
        (SkinTone.MEDIUM,): '\U0001f469\U0001f3fd\u200d\U0001f3a4',
        (SkinTone.MEDIUM_DARK,): '\U0001f469\U0001f3fe\u200d\U0001f3a4',
        (SkinTone.DARK,): '\U0001f469\U0001f3ff\u200d\U0001f3a4',
    },
    Emoji.ARTIST: {
        (SkinTone.LIGHT,): '\U0001f9d1\U0001f3fb\u200d\U0001f3a8',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d1\U0001f3fc\u200d\U0001f3a8',
        (SkinTone.MEDIUM,): '\U0001f9d1\U0001f3fd\u200d\U0001f3a8',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d1\U0001f3fe\u200d\U0001f3a8',
        (SkinTone.DARK,): '\U0001f9d1\U0001f3ff\u200d\U0001f3a8',
    },
    Emoji.MAN_ARTIST: {
        (SkinTone.LIGHT,): '\U0001f468\U0001f3fb\u200d\U0001f3a8',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f468\U0001f3fc\u200d\U0001f3a8',
        (SkinTone.MEDIUM,): '\U0001f468\U0001f3fd\u200d\U0001f3a8',
        (SkinTone.MEDIUM_DARK,): '\U0001f468\U0001f3fe\u200d\U0001f3a8',
        (SkinTone.DARK,): '\U0001f468\U0001f3ff\u200d\U0001f3a8',
    },
    Emoji.WOMAN_ARTIST: {
        (SkinTone.LIGHT,): '\U0001f469\U0001f3fb\u200d\U0001f3a8',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f469\U0001f3fc\u200d\U0001f3a8',
        (SkinTone.MEDIUM,): '\U0001f469\U0001f3fd\u200d\U0001f3a8',
        (SkinTone.MEDIUM_DARK,): '\U0001f469\U0001f3fe\u200d\U0001f3a8',
        (SkinTone.DARK,): '\U0001f469\U0001f3ff\u200d\U0001f3a8',
    },
    Emoji.PILOT: {
        (SkinTone.LIGHT,): '\U0001f9d1\U0001f3fb\u200d\u2708\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d1\U0001f3fc\u200d\u2708\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9d1\U0001f3fd\u200d\u2708\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d1\U0001f3fe\u200d\u2708\ufe0f',
        (SkinTone.DARK,): '\U0001f9d1\U0001f3ff\u200d\u2708\ufe0f',
    },
    Emoji.MAN_PILOT: {
        (SkinTone.LIGHT,): '\U0001f468\U0001f3fb\u200d\u2708\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f468\U0001f3fc\u200d\u2708\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f468\U0001f3fd\u200d\u2708\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f468\U0001f3fe\u200d\u2708\ufe0f',
        (SkinTone.DARK,): '\U0001f468\U0001f3ff\u200d\u2708\ufe0f',
    },
    Emoji.WOMAN_PILOT: {
        (SkinTone.LIGHT,): '\U0001f469\U0001f3fb\u200d\u2708\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f469\U0001f3fc\u200d\u2708\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f469\U0001f3fd\u200d\u2708\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f469\U0001f3fe\u200d\u2708\ufe0f',
        (SkinTone.DARK,): '\U0001f469\U0001f3ff\u200d\u2708\ufe0f',
    },
    Emoji.ASTRONAUT: {
        (SkinTone.LIGHT,): '\U0001f9d1\U0001f3fb\u200d\U0001f680',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d1\U0001f3fc\u200d\U0001f680',
        (SkinTone.MEDIUM,): '\U0001f9d1\U0001f3fd\u200d\U0001f680',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d1\U0001f3fe\u200d\U0001f680',
        (SkinTone.DARK,): '\U0001f9d1\U0001f3ff\u200d\U0001f680',
    },
    Emoji.MAN_ASTRONAUT: {
        (SkinTone.LIGHT,): '\U0001f468\U0001f3fb\u200d\U0001f680',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f468\U0001f3fc\u200d\U0001f680',
        (SkinTone.MEDIUM,): '\U0001f468\U0001f3fd\u200d\U0001f680',
        (SkinTone.MEDIUM_DARK,): '\U0001f468\U0001f3fe\u200d\U0001f680',
        (SkinTone.DARK,): '\U0001f468\U0001f3ff\u200d\U0001f680',
    },
    Emoji.WOMAN_ASTRONAUT: {
        (SkinTone.LIGHT,): '\U0001f469\U0001f3fb\u200d\U0001f680',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f469\U0001f3fc\u200d\U0001f680',
        (SkinTone.MEDIUM,): '\U0001f469\U0001f3fd\u200d\U0001f680',
        (SkinTone.MEDIUM_DARK,): '\U0001f469\U0001f3fe\u200d\U0001f680',
        (SkinTone.DARK,): '\U0001f469\U0001f3ff\u200d\U0001f680',
    },
    Emoji.FIREFIGHTER: {
        (SkinTone.LIGHT,): '\U0001f9d1\U0001f3fb\u200d\U0001f692',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d1\U0001f3fc\u200d\U0001f692',
        (SkinTone.MEDIUM,): '\U0001f9d1\U0001f3fd\u200d\U0001f692',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d1\U0001f3fe\u200d\U0001f692',
        (SkinTone.DARK,): '\U0001f9d1\U0001f3ff\u200d\U0001f692',
    },
    Emoji.MAN_FIREFIGHTER: {
        (SkinTone.LIGHT,): '\U0001f468\U0001f3fb\u200d\U0001f692',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f468\U0001f3fc\u200d\U0001f692',
        (SkinTone.MEDIUM,): '\U0001f468\U0001f3fd\u200d\U0001f692',
        (SkinTone.MEDIUM_DARK,): '\U0001f468\U0001f3fe\u200d\U0001f692',
        (SkinTone.DARK,): '\U0001f468\U0001f3ff\u200d\U0001f692',
    },
    Emoji.WOMAN_FIREFIGHTER: {
        (SkinTone.LIGHT,): '\U0001f469\U0001f3fb\u200d\U0001f692',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f469\U0001f3fc\u200d\U0001f692',
        (SkinTone.MEDIUM,): '\U0001f469\U0001f3fd\u200d\U0001f692',
        (SkinTone.MEDIUM_DARK,): '\U0001f469\U0001f3fe\u200d\U0001f692',
        (SkinTone.DARK,): '\U0001f469\U0001f3ff\u200d\U0001f692',
    },
    Emoji.POLICE_OFFICER: {
        (SkinTone.LIGHT,): '\U0001f46e\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f46e\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f46e\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f46e\U0001f3fe',
        (SkinTone.DARK,): '\U0001f46e\U0001f3ff',
    },
    Emoji.MAN_POLICE_OFFICER: {
        (SkinTone.LIGHT,): '\U0001f46e\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f46e\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f46e\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f46e\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f46e\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_POLICE_OFFICER: {
        (SkinTone.LIGHT,): '\U0001f46e\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f46e\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f46e\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f46e\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f46e\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.DETECTIVE: {
        (SkinTone.LIGHT,): '\U0001f575\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f575\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f575\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f575\U0001f3fe',
        (SkinTone.DARK,): '\U0001f575\U0001f3ff',
    },
    Emoji.MAN_DETECTIVE: {
        (SkinTone.LIGHT,): '\U0001f575\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f575\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f575\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f575\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f575\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_DETECTIVE: {
        (SkinTone.LIGHT,): '\U0001f575\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f575\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f575\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f575\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f575\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.GUARD: {
        (SkinTone.LIGHT,): '\U0001f482\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f482\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f482\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f482\U0001f3fe',
        (SkinTone.DARK,): '\U0001f482\U0001f3ff',
    },
    Emoji.MAN_GUARD: {
        (SkinTone.LIGHT,): '\U0001f482\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f482\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f482\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f482\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f482\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_GUARD: {
        (SkinTone.LIGHT,): '\U0001f482\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f482\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f482\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f482\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f482\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.NINJA: {
        (SkinTone.LIGHT,): '\U0001f977\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f977\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f977\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f977\U0001f3fe',
        (SkinTone.DARK,): '\U0001f977\U0001f3ff',
    },
    Emoji.CONSTRUCTION_WORKER: {
        (SkinTone.LIGHT,): '\U0001f477\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f477\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f477\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f477\U0001f3fe',
        (SkinTone.DARK,): '\U0001f477\U0001f3ff',
    },
    Emoji.MAN_CONSTRUCTION_WORKER: {
        (SkinTone.LIGHT,): '\U0001f477\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f477\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f477\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f477\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f477\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_CONSTRUCTION_WORKER: {
        (SkinTone.LIGHT,): '\U0001f477\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f477\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f477\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f477\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f477\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_WITH_CROWN: {
        (SkinTone.LIGHT,): '\U0001fac5\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001fac5\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001fac5\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001fac5\U0001f3fe',
        (SkinTone.DARK,): '\U0001fac5\U0001f3ff',
    },
    Emoji.PRINCE: {
        (SkinTone.LIGHT,): '\U0001f934\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f934\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f934\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f934\U0001f3fe',
        (SkinTone.DARK,): '\U0001f934\U0001f3ff',
    },
    Emoji.PRINCESS: {
        (SkinTone.LIGHT,): '\U0001f478\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f478\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f478\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f478\U0001f3fe',
        (SkinTone.DARK,): '\U0001f478\U0001f3ff',
    },
    Emoji.PERSON_WEARING_TURBAN: {
        (SkinTone.LIGHT,): '\U0001f473\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f473\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f473\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f473\U0001f3fe',
        (SkinTone.DARK,): '\U0001f473\U0001f3ff',
    },
    Emoji.MAN_WEARING_TURBAN: {
        (SkinTone.LIGHT,): '\U0001f473\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f473\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f473\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f473\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f473\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_WEARING_TURBAN: {
        (SkinTone.LIGHT,): '\U0001f473\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f473\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f473\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f473\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f473\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_WITH_SKULLCAP: {
        (SkinTone.LIGHT,): '\U0001f472\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f472\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f472\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f472\U0001f3fe',
        (SkinTone.DARK,): '\U0001f472\U0001f3ff',
    },
    Emoji.WOMAN_WITH_HEADSCARF: {
        (SkinTone.LIGHT,): '\U0001f9d5\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d5\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f9d5\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d5\U0001f3fe',
        (SkinTone.DARK,): '\U0001f9d5\U0001f3ff',
    },
    Emoji.PERSON_IN_TUXEDO: {
        (SkinTone.LIGHT,): '\U0001f935\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f935\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f935\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f935\U0001f3fe',
        (SkinTone.DARK,): '\U0001f935\U0001f3ff',
    },
    Emoji.MAN_IN_TUXEDO: {
        (SkinTone.LIGHT,): '\U0001f935\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f935\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f935\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f935\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f935\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_IN_TUXEDO: {
        (SkinTone.LIGHT,): '\U0001f935\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f935\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f935\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f935\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f935\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_WITH_VEIL: {
        (SkinTone.LIGHT,): '\U0001f470\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f470\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f470\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f470\U0001f3fe',
        (SkinTone.DARK,): '\U0001f470\U0001f3ff',
    },
    Emoji.MAN_WITH_VEIL: {
        (SkinTone.LIGHT,): '\U0001f470\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f470\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f470\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f470\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f470\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_WITH_VEIL: {
        (SkinTone.LIGHT,): '\U0001f470\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f470\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f470\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f470\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f470\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PREGNANT_WOMAN: {
        (SkinTone.LIGHT,): '\U0001f930\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f930\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f930\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f930\U0001f3fe',
        (SkinTone.DARK,): '\U0001f930\U0001f3ff',
    },
    Emoji.PREGNANT_MAN: {
        (SkinTone.LIGHT,): '\U0001fac3\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001fac3\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001fac3\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001fac3\U0001f3fe',
        (SkinTone.DARK,): '\U0001fac3\U0001f3ff',
    },
    Emoji.PREGNANT_PERSON: {
        (SkinTone.LIGHT,): '\U0001fac4\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001fac4\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001fac4\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001fac4\U0001f3fe',
        (SkinTone.DARK,): '\U0001fac4\U0001f3ff',
    },
    Emoji.BREAST_FEEDING: {
        (SkinTone.LIGHT,): '\U0001f931\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f931\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f931\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f931\U0001f3fe',
        (SkinTone.DARK,): '\U0001f931\U0001f3ff',
    },
    Emoji.WOMAN_FEEDING_BABY: {
        (SkinTone.LIGHT,): '\U0001f469\U0001f3fb\u200d\U0001f37c',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f469\U0001f3fc\u200d\U0001f37c',
        (SkinTone.MEDIUM,): '\U0001f469\U0001f3fd\u200d\U0001f37c',
        (SkinTone.MEDIUM_DARK,): '\U0001f469\U0001f3fe\u200d\U0001f37c',
        (SkinTone.DARK,): '\U0001f469\U0001f3ff\u200d\U0001f37c',
    },
    Emoji.MAN_FEEDING_BABY: {
        (SkinTone.LIGHT,): '\U0001f468\U0001f3fb\u200d\U0001f37c',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f468\U0001f3fc\u200d\U0001f37c',
        (SkinTone.MEDIUM,): '\U0001f468\U0001f3fd\u200d\U0001f37c',
        (SkinTone.MEDIUM_DARK,): '\U0001f468\U0001f3fe\u200d\U0001f37c',
        (SkinTone.DARK,): '\U0001f468\U0001f3ff\u200d\U0001f37c',
    },
    Emoji.PERSON_FEEDING_BABY: {
        (SkinTone.LIGHT,): '\U0001f9d1\U0001f3fb\u200d\U0001f37c',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d1\U0001f3fc\u200d\U0001f37c',
        (SkinTone.MEDIUM,): '\U0001f9d1\U0001f3fd\u200d\U0001f37c',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d1\U0001f3fe\u200d\U0001f37c',
        (SkinTone.DARK,): '\U0001f9d1\U0001f3ff\u200d\U0001f37c',
    },
    Emoji.BABY_ANGEL: {
        (SkinTone.LIGHT,): '\U0001f47c\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f47c\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f47c\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f47c\U0001f3fe',
        (SkinTone.DARK,): '\U0001f47c\U0001f3ff',
    },
    Emoji.SANTA_CLAUS: {
        (SkinTone.LIGHT,): '\U0001f385\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f385\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f385\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f385\U0001f3fe',
        (SkinTone.DARK,): '\U0001f385\U0001f3ff',
    },
    Emoji.MRS_CLAUS: {
        (SkinTone.LIGHT,): '\U0001f936\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f936\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f936\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f936\U0001f3fe',
        (SkinTone.DARK,): '\U0001f936\U0001f3ff',
    },
    Emoji.MX_CLAUS: {
        (SkinTone.LIGHT,): '\U0001f9d1\U0001f3fb\u200d\U0001f384',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d1\U0001f3fc\u200d\U0001f384',
        (SkinTone.MEDIUM,): '\U0001f9d1\U0001f3fd\u200d\U0001f384',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d1\U0001f3fe\u200d\U0001f384',
        (SkinTone.DARK,): '\U0001f9d1\U0001f3ff\u200d\U0001f384',
    },
    Emoji.SUPERHERO: {
        (SkinTone.LIGHT,): '\U0001f9b8\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9b8\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f9b8\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f9b8\U0001f3fe',
        (SkinTone.DARK,): '\U0001f9b8\U0001f3ff',
    },
    Emoji.MAN_SUPERHERO: {
        (SkinTone.LIGHT,): '\U0001f9b8\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9b8\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9b8\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9b8\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f9b8\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_SUPERHERO: {
        (SkinTone.LIGHT,): '\U0001f9b8\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9b8\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9b8\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9b8\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f9b8\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.SUPERVILLAIN: {
        (SkinTone.LIGHT,): '\U0001f9b9\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9b9\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f9b9\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f9b9\U0001f3fe',
        (SkinTone.DARK,): '\U0001f9b9\U0001f3ff',
    },
    Emoji.MAN_SUPERVILLAIN: {
        (SkinTone.LIGHT,): '\U0001f9b9\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9b9\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9b9\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9b9\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f9b9\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_SUPERVILLAIN: {
        (SkinTone.LIGHT,): '\U0001f9b9\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9b9\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9b9\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9b9\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f9b9\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.MAGE: {
        (SkinTone.LIGHT,): '\U0001f9d9\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d9\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f9d9\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d9\U0001f3fe',
        (SkinTone.DARK,): '\U0001f9d9\U0001f3ff',
    },
    Emoji.MAN_MAGE: {
        (SkinTone.LIGHT,): '\U0001f9d9\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d9\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9d9\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d9\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f9d9\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_MAGE: {
        (SkinTone.LIGHT,): '\U0001f9d9\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d9\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9d9\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d9\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f9d9\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.FAIRY: {
        (SkinTone.LIGHT,): '\U0001f9da\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9da\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f9da\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f9da\U0001f3fe',
        (SkinTone.DARK,): '\U0001f9da\U0001f3ff',
    },
    Emoji.MAN_FAIRY: {
        (SkinTone.LIGHT,): '\U0001f9da\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9da\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9da\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9da\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f9da\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_FAIRY: {
        (SkinTone.LIGHT,): '\U0001f9da\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9da\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9da\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9da\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f9da\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.VAMPIRE: {
        (SkinTone.LIGHT,): '\U0001f9db\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9db\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f9db\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f9db\U0001f3fe',
        (SkinTone.DARK,): '\U0001f9db\U0001f3ff',
    },
    Emoji.MAN_VAMPIRE: {
        (SkinTone.LIGHT,): '\U0001f9db\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9db\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9db\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9db\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f9db\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_VAMPIRE: {
        (SkinTone.LIGHT,): '\U0001f9db\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9db\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9db\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9db\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f9db\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.MERPERSON: {
        (SkinTone.LIGHT,): '\U0001f9dc\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9dc\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f9dc\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f9dc\U0001f3fe',
        (SkinTone.DARK,): '\U0001f9dc\U0001f3ff',
    },
    Emoji.MERMAN: {
        (SkinTone.LIGHT,): '\U0001f9dc\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9dc\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9dc\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9dc\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f9dc\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.MERMAID: {
        (SkinTone.LIGHT,): '\U0001f9dc\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9dc\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9dc\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9dc\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f9dc\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.ELF: {
        (SkinTone.LIGHT,): '\U0001f9dd\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9dd\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f9dd\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f9dd\U0001f3fe',
        (SkinTone.DARK,): '\U0001f9dd\U0001f3ff',
    },
    Emoji.MAN_ELF: {
        (SkinTone.LIGHT,): '\U0001f9dd\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9dd\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9dd\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9dd\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f9dd\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_ELF: {
        (SkinTone.LIGHT,): '\U0001f9dd\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9dd\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9dd\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9dd\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f9dd\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_GETTING_MASSAGE: {
        (SkinTone.LIGHT,): '\U0001f486\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f486\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f486\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f486\U0001f3fe',
        (SkinTone.DARK,): '\U0001f486\U0001f3ff',
    },
    Emoji.MAN_GETTING_MASSAGE: {
        (SkinTone.LIGHT,): '\U0001f486\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f486\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f486\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f486\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f486\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_GETTING_MASSAGE: {
        (SkinTone.LIGHT,): '\U0001f486\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f486\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f486\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f486\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f486\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_GETTING_HAIRCUT: {
        (SkinTone.LIGHT,): '\U0001f487\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f487\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f487\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f487\U0001f3fe',
        (SkinTone.DARK,): '\U0001f487\U0001f3ff',
    },
    Emoji.MAN_GETTING_HAIRCUT: {
        (SkinTone.LIGHT,): '\U0001f487\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f487\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f487\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f487\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f487\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_GETTING_HAIRCUT: {
        (SkinTone.LIGHT,): '\U0001f487\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f487\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f487\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f487\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f487\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_WALKING: {
        (SkinTone.LIGHT,): '\U0001f6b6\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f6b6\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f6b6\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f6b6\U0001f3fe',
        (SkinTone.DARK,): '\U0001f6b6\U0001f3ff',
    },
    Emoji.MAN_WALKING: {
        (SkinTone.LIGHT,): '\U0001f6b6\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f6b6\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f6b6\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f6b6\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f6b6\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_WALKING: {
        (SkinTone.LIGHT,): '\U0001f6b6\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f6b6\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f6b6\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f6b6\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f6b6\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_WALKING_FACING_RIGHT: {
        (SkinTone.LIGHT,): '\U0001f6b6\U0001f3fb\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f6b6\U0001f3fc\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f6b6\U0001f3fd\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f6b6\U0001f3fe\u200d\u27a1\ufe0f',
        (SkinTone.DARK,): '\U0001f6b6\U0001f3ff\u200d\u27a1\ufe0f',
    },
    Emoji.WOMAN_WALKING_FACING_RIGHT: {
        (SkinTone.LIGHT,): '\U0001f6b6\U0001f3fb\u200d\u2640\ufe0f\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f6b6\U0001f3fc\u200d\u2640\ufe0f\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f6b6\U0001f3fd\u200d\u2640\ufe0f\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f6b6\U0001f3fe\u200d\u2640\ufe0f\u200d\u27a1\ufe0f',
        (SkinTone.DARK,): '\U0001f6b6\U0001f3ff\u200d\u2640\ufe0f\u200d\u27a1\ufe0f',
    },
    Emoji.MAN_WALKING_FACING_RIGHT: {
        (SkinTone.LIGHT,): '\U0001f6b6\U0001f3fb\u200d\u2642\ufe0f\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f6b6\U0001f3fc\u200d\u2642\ufe0f\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f6b6\U0001f3fd\u200d\u2642\ufe0f\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f6b6\U0001f3fe\u200d\u2642\ufe0f\u200d\u27a1\ufe0f',
        (SkinTone.DARK,): '\U0001f6b6\U0001f3ff\u200d\u2642\ufe0f\u200d\u27a1\ufe0f',
    },
    Emoji.PERSON_STANDING: {
        (SkinTone.LIGHT,): '\U0001f9cd\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9cd\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f9cd\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f9cd\U0001f3fe',
        (SkinTone.DARK,): '\U0001f9cd\U0001f3ff',
    },
    Emoji.MAN_STANDING: {
        (SkinTone.LIGHT,): '\U0001f9cd\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9cd\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9cd\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9cd\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f9cd\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_STANDING: {
        (SkinTone.LIGHT,): '\U0001f9cd\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9cd\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9cd\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9cd\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f9cd\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_KNEELING: {
        (SkinTone.LIGHT,): '\U0001f9ce\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9ce\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f9ce\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f9ce\U0001f3fe',
        (SkinTone.DARK,): '\U0001f9ce\U0001f3ff',
    },
    Emoji.MAN_KNEELING: {
        (SkinTone.LIGHT,): '\U0001f9ce\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9ce\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9ce\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9ce\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f9ce\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_KNEELING: {
        (SkinTone.LIGHT,): '\U0001f9ce\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9ce\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9ce\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9ce\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f9ce\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_KNEELING_FACING_RIGHT: {
        (SkinTone.LIGHT,): '\U0001f9ce\U0001f3fb\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9ce\U0001f3fc\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9ce\U0001f3fd\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9ce\U0001f3fe\u200d\u27a1\ufe0f',
        (SkinTone.DARK,): '\U0001f9ce\U0001f3ff\u200d\u27a1\ufe0f',
    },
    Emoji.WOMAN_KNEELING_FACING_RIGHT: {
        (SkinTone.LIGHT,): '\U0001f9ce\U0001f3fb\u200d\u2640\ufe0f\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9ce\U0001f3fc\u200d\u2640\ufe0f\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9ce\U0001f3fd\u200d\u2640\ufe0f\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9ce\U0001f3fe\u200d\u2640\ufe0f\u200d\u27a1\ufe0f',
        (SkinTone.DARK,): '\U0001f9ce\U0001f3ff\u200d\u2640\ufe0f\u200d\u27a1\ufe0f',
    },
    Emoji.MAN_KNEELING_FACING_RIGHT: {
        (SkinTone.LIGHT,): '\U0001f9ce\U0001f3fb\u200d\u2642\ufe0f\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9ce\U0001f3fc\u200d\u2642\ufe0f\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9ce\U0001f3fd\u200d\u2642\ufe0f\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9ce\U0001f3fe\u200d\u2642\ufe0f\u200d\u27a1\ufe0f',
        (SkinTone.DARK,): '\U0001f9ce\U0001f3ff\u200d\u2642\ufe0f\u200d\u27a1\ufe0f',
    },
    Emoji.PERSON_WITH_WHITE_CANE: {
        (SkinTone.LIGHT,): '\U0001f9d1\U0001f3fb\u200d\U0001f9af',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d1\U0001f3fc\u200d\U0001f9af',
        (SkinTone.MEDIUM,): '\U0001f9d1\U0001f3fd\u200d\U0001f9af',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d1\U0001f3fe\u200d\U0001f9af',
        (SkinTone.DARK,): '\U0001f9d1\U0001f3ff\u200d\U0001f9af',
    },
    Emoji.PERSON_WITH_WHITE_CANE_FACING_RIGHT: {
        (SkinTone.LIGHT,): '\U0001f9d1\U0001f3fb\u200d\U0001f9af\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d1\U0001f3fc\u200d\U0001f9af\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9d1\U0001f3fd\u200d\U0001f9af\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d1\U0001f3fe\u200d\U0001f9af\u200d\u27a1\ufe0f',
        (SkinTone.DARK,): '\U0001f9d1\U0001f3ff\u200d\U0001f9af\u200d\u27a1\ufe0f',
    },
    Emoji.MAN_WITH_WHITE_CANE: {
        (SkinTone.LIGHT,): '\U0001f468\U0001f3fb\u200d\U0001f9af',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f468\U0001f3fc\u200d\U0001f9af',
        (SkinTone.MEDIUM,): '\U0001f468\U0001f3fd\u200d\U0001f9af',
        (SkinTone.MEDIUM_DARK,): '\U0001f468\U0001f3fe\u200d\U0001f9af',
        (SkinTone.DARK,): '\U0001f468\U0001f3ff\u200d\U0001f9af',
    },
    Emoji.MAN_WITH_WHITE_CANE_FACING_RIGHT: {
        (SkinTone.LIGHT,): '\U0001f468\U0001f3fb\u200d\U0001f9af\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f468\U0001f3fc\u200d\U0001f9af\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f468\U0001f3fd\u200d\U0001f9af\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f468\U0001f3fe\u200d\U0001f9af\u200d\u27a1\ufe0f',
        (SkinTone.DARK,): '\U0001f468\U0001f3ff\u200d\U0001f9af\u200d\u27a1\ufe0f',
    },
    Emoji.WOMAN_WITH_WHITE_CANE: {
        (SkinTone.LIGHT,): '\U0001f469\U0001f3fb\u200d\U0001f9af',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f469\U0001f3fc\u200d\U0001f9af',
        (SkinTone.MEDIUM,): '\U0001f469\U0001f3fd\u200d\U0001f9af',
        (SkinTone.MEDIUM_DARK,): '\U0001f469\U0001f3fe\u200d\U0001f9af',
        (SkinTone.DARK,): '\U0001f469\U0001f3ff\u200d\U0001f9af',
    },
    Emoji.WOMAN_WITH_WHITE_CANE_FACING_RIGHT: {
        (SkinTone.LIGHT,): '\U0001f469\U0001f3fb\u200d\U0001f9af\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f469\U0001f3fc\u200d\U0001f9af\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f469\U0001f3fd\u200d\U0001f9af\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f469\U0001f3fe\u200d\U0001f9af\u200d\u27a1\ufe0f',
        (SkinTone.DARK,): '\U0001f469\U0001f3ff\u200d\U0001f9af\u200d\u27a1\ufe0f',
    },
    Emoji.PERSON_IN_MOTORIZED_WHEELCHAIR: {
        (SkinTone.LIGHT,): '\U0001f9d1\U0001f3fb\u200d\U0001f9bc',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d1\U0001f3fc\u200d\U0001f9bc',
        (SkinTone.MEDIUM,): '\U0001f9d1\U0001f3fd\u200d\U0001f9bc',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d1\U0001f3fe\u200d\U0001f9bc',
        (SkinTone.DARK,): '\U0001f9d1\U0001f3ff\u200d\U0001f9bc',
    },
    Emoji.PERSON_IN_MOTORIZED_WHEELCHAIR_FACING_RIGHT: {
        (SkinTone.LIGHT,): '\U0001f9d1\U0001f3fb\u200d\U0001f9bc\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d1\U0001f3fc\u200d\U0001f9bc\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9d1\U0001f3fd\u200d\U0001f9bc\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d1\U0001f3fe\u200d\U0001f9bc\u200d\u27a1\ufe0f',
        (SkinTone.DARK,): '\U0001f9d1\U0001f3ff\u200d\U0001f9bc\u200d\u27a1\ufe0f',
    },
    Emoji.MAN_IN_MOTORIZED_WHEELCHAIR: {
        (SkinTone.LIGHT,): '\U0001f468\U0001f3fb\u200d\U0001f9bc',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f468\U0001f3fc\u200d\U0001f9bc',
        (SkinTone.MEDIUM,): '\U0001f468\U0001f3fd\u200d\U0001f9bc',
        (SkinTone.MEDIUM_DARK,): '\U0001f468\U0001f3fe\u200d\U0001f9bc',
        (SkinTone.DARK,): '\U0001f468\U0001f3ff\u200d\U0001f9bc',
    },
    Emoji.MAN_IN_MOTORIZED_WHEELCHAIR_FACING_RIGHT: {
        (SkinTone.LIGHT,): '\U0001f468\U0001f3fb\u200d\U0001f9bc\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f468\U0001f3fc\u200d\U0001f9bc\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f468\U0001f3fd\u200d\U0001f9bc\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f468\U0001f3fe\u200d\U0001f9bc\u200d\u27a1\ufe0f',
        (SkinTone.DARK,): '\U0001f468\U0001f3ff\u200d\U0001f9bc\u200d\u27a1\ufe0f',
    },
    Emoji.WOMAN_IN_MOTORIZED_WHEELCHAIR: {
        (SkinTone.LIGHT,): '\U0001f469\U0001f3fb\u200d\U0001f9bc',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f469\U0001f3fc\u200d\U0001f9bc',
        (SkinTone.MEDIUM,): '\U0001f469\U0001f3fd\u200d\U0001f9bc',
        (SkinTone.MEDIUM_DARK,): '\U0001f469\U0001f3fe\u200d\U0001f9bc',
        (SkinTone.DARK,): '\U0001f469\U0001f3ff\u200d\U0001f9bc',
    },
    Emoji.WOMAN_IN_MOTORIZED_WHEELCHAIR_FACING_RIGHT: {
        (SkinTone.LIGHT,): '\U0001f469\U0001f3fb\u200d\U0001f9bc\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f469\U0001f3fc\u200d\U0001f9bc\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f469\U0001f3fd\u200d\U0001f9bc\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f469\U0001f3fe\u200d\U0001f9bc\u200d\u27a1\ufe0f',
        (SkinTone.DARK,): '\U0001f469\U0001f3ff\u200d\U0001f9bc\u200d\u27a1\ufe0f',
    },
    Emoji.PERSON_IN_MANUAL_WHEELCHAIR: {
        (SkinTone.LIGHT,): '\U0001f9d1\U0001f3fb\u200d\U0001f9bd',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d1\U0001f3fc\u200d\U0001f9bd',
        (SkinTone.MEDIUM,): '\U0001f9d1\U0001f3fd\u200d\U0001f9bd',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d1\U0001f3fe\u200d\U0001f9bd',
        (SkinTone.DARK,): '\U0001f9d1\U0001f3ff\u200d\U0001f9bd',
    },
    Emoji.PERSON_IN_MANUAL_WHEELCHAIR_FACING_RIGHT: {
        (SkinTone.LIGHT,): '\U0001f9d1\U0001f3fb\u200d\U0001f9bd\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d1\U0001f3fc\u200d\U0001f9bd\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9d1\U0001f3fd\u200d\U0001f9bd\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d1\U0001f3fe\u200d\U0001f9bd\u200d\u27a1\ufe0f',
        (SkinTone.DARK,): '\U0001f9d1\U0001f3ff\u200d\U0001f9bd\u200d\u27a1\ufe0f',
    },
    Emoji.MAN_IN_MANUAL_WHEELCHAIR: {
        (SkinTone.LIGHT,): '\U0001f468\U0001f3fb\u200d\U0001f9bd',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f468\U0001f3fc\u200d\U0001f9bd',
        (SkinTone.MEDIUM,): '\U0001f468\U0001f3fd\u200d\U0001f9bd',
        (SkinTone.MEDIUM_DARK,): '\U0001f468\U0001f3fe\u200d\U0001f9bd',
        (SkinTone.DARK,): '\U0001f468\U0001f3ff\u200d\U0001f9bd',
    },
    Emoji.MAN_IN_MANUAL_WHEELCHAIR_FACING_RIGHT: {
        (SkinTone.LIGHT,): '\U0001f468\U0001f3fb\u200d\U0001f9bd\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f468\U0001f3fc\u200d\U0001f9bd\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f468\U0001f3fd\u200d\U0001f9bd\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f468\U0001f3fe\u200d\U0001f9bd\u200d\u27a1\ufe0f',
        (SkinTone.DARK,): '\U0001f468\U0001f3ff\u200d\U0001f9bd\u200d\u27a1\ufe0f',
    },
    Emoji.WOMAN_IN_MANUAL_WHEELCHAIR: {
        (SkinTone.LIGHT,): '\U0001f469\U0001f3fb\u200d\U0001f9bd',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f469\U0001f3fc\u200d\U0001f9bd',
        (SkinTone.MEDIUM,): '\U0001f469\U0001f3fd\u200d\U0001f9bd',
        (SkinTone.MEDIUM_DARK,): '\U0001f469\U0001f3fe\u200d\U0001f9bd',
        (SkinTone.DARK,): '\U0001f469\U0001f3ff\u200d\U0001f9bd',
    },
    Emoji.WOMAN_IN_MANUAL_WHEELCHAIR_FACING_RIGHT: {
        (SkinTone.LIGHT,): '\U0001f469\U0001f3fb\u200d\U0001f9bd\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f469\U0001f3fc\u200d\U0001f9bd\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f469\U0001f3fd\u200d\U0001f9bd\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f469\U0001f3fe\u200d\U0001f9bd\u200d\u27a1\ufe0f',
        (SkinTone.DARK,): '\U0001f469\U0001f3ff\u200d\U0001f9bd\u200d\u27a1\ufe0f',
    },
    Emoji.PERSON_RUNNING: {
        (SkinTone.LIGHT,): '\U0001f3c3\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f3c3\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f3c3\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f3c3\U0001f3fe',
        (SkinTone.DARK,): '\U0001f3c3\U0001f3ff',
    },
    Emoji.MAN_RUNNING: {
        (SkinTone.LIGHT,): '\U0001f3c3\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f3c3\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f3c3\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f3c3\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f3c3\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_RUNNING: {
        (SkinTone.LIGHT,): '\U0001f3c3\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f3c3\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f3c3\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f3c3\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f3c3\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_RUNNING_FACING_RIGHT: {
        (SkinTone.LIGHT,): '\U0001f3c3\U0001f3fb\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f3c3\U0001f3fc\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f3c3\U0001f3fd\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f3c3\U0001f3fe\u200d\u27a1\ufe0f',
        (SkinTone.DARK,): '\U0001f3c3\U0001f3ff\u200d\u27a1\ufe0f',
    },
    Emoji.WOMAN_RUNNING_FACING_RIGHT: {
        (SkinTone.LIGHT,): '\U0001f3c3\U0001f3fb\u200d\u2640\ufe0f\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f3c3\U0001f3fc\u200d\u2640\ufe0f\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f3c3\U0001f3fd\u200d\u2640\ufe0f\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f3c3\U0001f3fe\u200d\u2640\ufe0f\u200d\u27a1\ufe0f',
        (SkinTone.DARK,): '\U0001f3c3\U0001f3ff\u200d\u2640\ufe0f\u200d\u27a1\ufe0f',
    },
    Emoji.MAN_RUNNING_FACING_RIGHT: {
        (SkinTone.LIGHT,): '\U0001f3c3\U0001f3fb\u200d\u2642\ufe0f\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f3c3\U0001f3fc\u200d\u2642\ufe0f\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f3c3\U0001f3fd\u200d\u2642\ufe0f\u200d\u27a1\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f3c3\U0001f3fe\u200d\u2642\ufe0f\u200d\u27a1\ufe0f',
        (SkinTone.DARK,): '\U0001f3c3\U0001f3ff\u200d\u2642\ufe0f\u200d\u27a1\ufe0f',
    },
    Emoji.WOMAN_DANCING: {
        (SkinTone.LIGHT,): '\U0001f483\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f483\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f483\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f483\U0001f3fe',
        (SkinTone.DARK,): '\U0001f483\U0001f3ff',
    },
    Emoji.MAN_DANCING: {
        (SkinTone.LIGHT,): '\U0001f57a\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f57a\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f57a\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f57a\U0001f3fe',
        (SkinTone.DARK,): '\U0001f57a\U0001f3ff',
    },
    Emoji.PERSON_IN_SUIT_LEVITATING: {
        (SkinTone.LIGHT,): '\U0001f574\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f574\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f574\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f574\U0001f3fe',
        (SkinTone.DARK,): '\U0001f574\U0001f3ff',
    },
    Emoji.PERSON_IN_STEAMY_ROOM: {
        (SkinTone.LIGHT,): '\U0001f9d6\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d6\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f9d6\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d6\U0001f3fe',
        (SkinTone.DARK,): '\U0001f9d6\U0001f3ff',
    },
    Emoji.MAN_IN_STEAMY_ROOM: {
        (SkinTone.LIGHT,): '\U0001f9d6\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d6\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9d6\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d6\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f9d6\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_IN_STEAMY_ROOM: {
        (SkinTone.LIGHT,): '\U0001f9d6\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d6\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9d6\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d6\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f9d6\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_CLIMBING: {
        (SkinTone.LIGHT,): '\U0001f9d7\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d7\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f9d7\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d7\U0001f3fe',
        (SkinTone.DARK,): '\U0001f9d7\U0001f3ff',
    },
    Emoji.MAN_CLIMBING: {
        (SkinTone.LIGHT,): '\U0001f9d7\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d7\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9d7\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d7\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f9d7\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_CLIMBING: {
        (SkinTone.LIGHT,): '\U0001f9d7\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d7\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9d7\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d7\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f9d7\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.HORSE_RACING: {
        (SkinTone.LIGHT,): '\U0001f3c7\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f3c7\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f3c7\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f3c7\U0001f3fe',
        (SkinTone.DARK,): '\U0001f3c7\U0001f3ff',
    },
    Emoji.SNOWBOARDER: {
        (SkinTone.LIGHT,): '\U0001f3c2\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f3c2\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f3c2\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f3c2\U0001f3fe',
        (SkinTone.DARK,): '\U0001f3c2\U0001f3ff',
    },
    Emoji.PERSON_GOLFING: {
        (SkinTone.LIGHT,): '\U0001f3cc\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f3cc\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f3cc\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f3cc\U0001f3fe',
        (SkinTone.DARK,): '\U0001f3cc\U0001f3ff',
    },
    Emoji.MAN_GOLFING: {
        (SkinTone.LIGHT,): '\U0001f3cc\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f3cc\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f3cc\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f3cc\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f3cc\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_GOLFING: {
        (SkinTone.LIGHT,): '\U0001f3cc\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f3cc\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f3cc\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f3cc\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f3cc\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_SURFING: {
        (SkinTone.LIGHT,): '\U0001f3c4\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f3c4\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f3c4\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f3c4\U0001f3fe',
        (SkinTone.DARK,): '\U0001f3c4\U0001f3ff',
    },
    Emoji.MAN_SURFING: {
        (SkinTone.LIGHT,): '\U0001f3c4\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f3c4\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f3c4\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f3c4\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f3c4\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_SURFING: {
        (SkinTone.LIGHT,): '\U0001f3c4\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f3c4\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f3c4\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f3c4\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f3c4\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_ROWING_BOAT: {
        (SkinTone.LIGHT,): '\U0001f6a3\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f6a3\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f6a3\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f6a3\U0001f3fe',
        (SkinTone.DARK,): '\U0001f6a3\U0001f3ff',
    },
    Emoji.MAN_ROWING_BOAT: {
        (SkinTone.LIGHT,): '\U0001f6a3\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f6a3\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f6a3\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f6a3\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f6a3\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_ROWING_BOAT: {
        (SkinTone.LIGHT,): '\U0001f6a3\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f6a3\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f6a3\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f6a3\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f6a3\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_SWIMMING: {
        (SkinTone.LIGHT,): '\U0001f3ca\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f3ca\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f3ca\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f3ca\U0001f3fe',
        (SkinTone.DARK,): '\U0001f3ca\U0001f3ff',
    },
    Emoji.MAN_SWIMMING: {
        (SkinTone.LIGHT,): '\U0001f3ca\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f3ca\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f3ca\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f3ca\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f3ca\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_SWIMMING: {
        (SkinTone.LIGHT,): '\U0001f3ca\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f3ca\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f3ca\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f3ca\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f3ca\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_BOUNCING_BALL: {
        (SkinTone.LIGHT,): '\u26f9\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\u26f9\U0001f3fc',
        (SkinTone.MEDIUM,): '\u26f9\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\u26f9\U0001f3fe',
        (SkinTone.DARK,): '\u26f9\U0001f3ff',
    },
    Emoji.MAN_BOUNCING_BALL: {
        (SkinTone.LIGHT,): '\u26f9\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\u26f9\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\u26f9\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\u26f9\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\u26f9\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_BOUNCING_BALL: {
        (SkinTone.LIGHT,): '\u26f9\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\u26f9\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\u26f9\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\u26f9\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\u26f9\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_LIFTING_WEIGHTS: {
        (SkinTone.LIGHT,): '\U0001f3cb\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f3cb\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f3cb\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f3cb\U0001f3fe',
        (SkinTone.DARK,): '\U0001f3cb\U0001f3ff',
    },
    Emoji.MAN_LIFTING_WEIGHTS: {
        (SkinTone.LIGHT,): '\U0001f3cb\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f3cb\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f3cb\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f3cb\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f3cb\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_LIFTING_WEIGHTS: {
        (SkinTone.LIGHT,): '\U0001f3cb\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f3cb\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f3cb\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f3cb\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f3cb\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_BIKING: {
        (SkinTone.LIGHT,): '\U0001f6b4\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f6b4\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f6b4\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f6b4\U0001f3fe',
        (SkinTone.DARK,): '\U0001f6b4\U0001f3ff',
    },
    Emoji.MAN_BIKING: {
        (SkinTone.LIGHT,): '\U0001f6b4\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f6b4\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f6b4\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f6b4\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f6b4\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_BIKING: {
        (SkinTone.LIGHT,): '\U0001f6b4\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f6b4\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f6b4\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f6b4\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f6b4\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_MOUNTAIN_BIKING: {
        (SkinTone.LIGHT,): '\U0001f6b5\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f6b5\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f6b5\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f6b5\U0001f3fe',
        (SkinTone.DARK,): '\U0001f6b5\U0001f3ff',
    },
    Emoji.MAN_MOUNTAIN_BIKING: {
        (SkinTone.LIGHT,): '\U0001f6b5\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f6b5\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f6b5\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f6b5\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f6b5\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_MOUNTAIN_BIKING: {
        (SkinTone.LIGHT,): '\U0001f6b5\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f6b5\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f6b5\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f6b5\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f6b5\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_CARTWHEELING: {
        (SkinTone.LIGHT,): '\U0001f938\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f938\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f938\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f938\U0001f3fe',
        (SkinTone.DARK,): '\U0001f938\U0001f3ff',
    },
    Emoji.MAN_CARTWHEELING: {
        (SkinTone.LIGHT,): '\U0001f938\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f938\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f938\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f938\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f938\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_CARTWHEELING: {
        (SkinTone.LIGHT,): '\U0001f938\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f938\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f938\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f938\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f938\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_PLAYING_WATER_POLO: {
        (SkinTone.LIGHT,): '\U0001f93d\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f93d\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f93d\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f93d\U0001f3fe',
        (SkinTone.DARK,): '\U0001f93d\U0001f3ff',
    },
    Emoji.MAN_PLAYING_WATER_POLO: {
        (SkinTone.LIGHT,): '\U0001f93d\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f93d\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f93d\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f93d\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f93d\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_PLAYING_WATER_POLO: {
        (SkinTone.LIGHT,): '\U0001f93d\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f93d\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f93d\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f93d\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f93d\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_PLAYING_HANDBALL: {
        (SkinTone.LIGHT,): '\U0001f93e\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f93e\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f93e\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f93e\U0001f3fe',
        (SkinTone.DARK,): '\U0001f93e\U0001f3ff',
    },
    Emoji.MAN_PLAYING_HANDBALL: {
        (SkinTone.LIGHT,): '\U0001f93e\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f93e\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f93e\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f93e\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f93e\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_PLAYING_HANDBALL: {
        (SkinTone.LIGHT,): '\U0001f93e\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f93e\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f93e\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f93e\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f93e\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_JUGGLING: {
        (SkinTone.LIGHT,): '\U0001f939\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f939\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f939\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f939\U0001f3fe',
        (SkinTone.DARK,): '\U0001f939\U0001f3ff',
    },
    Emoji.MAN_JUGGLING: {
        (SkinTone.LIGHT,): '\U0001f939\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f939\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f939\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f939\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f939\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_JUGGLING: {
        (SkinTone.LIGHT,): '\U0001f939\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f939\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f939\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f939\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f939\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_IN_LOTUS_POSITION: {
        (SkinTone.LIGHT,): '\U0001f9d8\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d8\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f9d8\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d8\U0001f3fe',
        (SkinTone.DARK,): '\U0001f9d8\U0001f3ff',
    },
    Emoji.MAN_IN_LOTUS_POSITION: {
        (SkinTone.LIGHT,): '\U0001f9d8\U0001f3fb\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d8\U0001f3fc\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9d8\U0001f3fd\u200d\u2642\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d8\U0001f3fe\u200d\u2642\ufe0f',
        (SkinTone.DARK,): '\U0001f9d8\U0001f3ff\u200d\u2642\ufe0f',
    },
    Emoji.WOMAN_IN_LOTUS_POSITION: {
        (SkinTone.LIGHT,): '\U0001f9d8\U0001f3fb\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f9d8\U0001f3fc\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM,): '\U0001f9d8\U0001f3fd\u200d\u2640\ufe0f',
        (SkinTone.MEDIUM_DARK,): '\U0001f9d8\U0001f3fe\u200d\u2640\ufe0f',
        (SkinTone.DARK,): '\U0001f9d8\U0001f3ff\u200d\u2640\ufe0f',
    },
    Emoji.PERSON_TAKING_BATH: {
        (SkinTone.LIGHT,): '\U0001f6c0\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f6c0\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f6c0\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f6c0\U0001f3fe',
        (SkinTone.DARK,): '\U0001f6c0\U0001f3ff',
    },
    Emoji.PERSON_IN_BED: {
        (SkinTone.LIGHT,): '\U0001f6cc\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f6cc\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f6cc\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f6cc\U0001f3fe',
        (SkinTone.DARK,): '\U0001f6cc\U0001f3ff',
    },
    Emoji.PEOPLE_HOLDING_HANDS: {
        (SkinTone.LIGHT, SkinTone.LIGHT): '\U0001f9d1\U0001f3fb\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fb',
        (SkinTone.LIGHT, SkinTone.MEDIUM_LIGHT): '\U0001f9d1\U0001f3fb\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fc',
        (SkinTone.LIGHT, SkinTone.MEDIUM): '\U0001f9d1\U0001f3fb\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fd',
        (SkinTone.LIGHT, SkinTone.MEDIUM_DARK): '\U0001f9d1\U0001f3fb\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fe',
        (SkinTone.LIGHT, SkinTone.DARK): '\U0001f9d1\U0001f3fb\u200d\U0001f91d\u200d\U0001f9d1\U0001f3ff',
        (SkinTone.MEDIUM_LIGHT, SkinTone.LIGHT): '\U0001f9d1\U0001f3fc\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM_LIGHT): '\U0001f9d1\U0001f3fc\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fc',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM): '\U0001f9d1\U0001f3fc\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fd',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM_DARK): '\U0001f9d1\U0001f3fc\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fe',
        (SkinTone.MEDIUM_LIGHT, SkinTone.DARK): '\U0001f9d1\U0001f3fc\u200d\U0001f91d\u200d\U0001f9d1\U0001f3ff',
        (SkinTone.MEDIUM, SkinTone.LIGHT): '\U0001f9d1\U0001f3fd\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fb',
        (SkinTone.MEDIUM, SkinTone.MEDIUM_LIGHT): '\U0001f9d1\U0001f3fd\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fc',
        (SkinTone.MEDIUM, SkinTone.MEDIUM): '\U0001f9d1\U0001f3fd\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fd',
        (SkinTone.MEDIUM, SkinTone.MEDIUM_DARK): '\U0001f9d1\U0001f3fd\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fe',
        (SkinTone.MEDIUM, SkinTone.DARK): '\U0001f9d1\U0001f3fd\u200d\U0001f91d\u200d\U0001f9d1\U0001f3ff',
        (SkinTone.MEDIUM_DARK, SkinTone.LIGHT): '\U0001f9d1\U0001f3fe\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fb',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM_LIGHT): '\U0001f9d1\U0001f3fe\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fc',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM): '\U0001f9d1\U0001f3fe\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fd',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM_DARK): '\U0001f9d1\U0001f3fe\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fe',
        (SkinTone.MEDIUM_DARK, SkinTone.DARK): '\U0001f9d1\U0001f3fe\u200d\U0001f91d\u200d\U0001f9d1\U0001f3ff',
        (SkinTone.DARK, SkinTone.LIGHT): '\U0001f9d1\U0001f3ff\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fb',
        (SkinTone.DARK, SkinTone.MEDIUM_LIGHT): '\U0001f9d1\U0001f3ff\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fc',
        (SkinTone.DARK, SkinTone.MEDIUM): '\U0001f9d1\U0001f3ff\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fd',
        (SkinTone.DARK, SkinTone.MEDIUM_DARK): '\U0001f9d1\U0001f3ff\u200d\U0001f91d\u200d\U0001f9d1\U0001f3fe',
        (SkinTone.DARK, SkinTone.DARK): '\U0001f9d1\U0001f3ff\u200d\U0001f91d\u200d\U0001f9d1\U0001f3ff',
    },
    Emoji.WOMEN_HOLDING_HANDS: {
        (SkinTone.LIGHT,): '\U0001f46d\U0001f3fb',
        (SkinTone.LIGHT, SkinTone.MEDIUM_LIGHT): '\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f469\U0001f3fc',
        (SkinTone.LIGHT, SkinTone.MEDIUM): '\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f469\U0001f3fd',
        (SkinTone.LIGHT, SkinTone.MEDIUM_DARK): '\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f469\U0001f3fe',
        (SkinTone.LIGHT, SkinTone.DARK): '\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f469\U0001f3ff',
        (SkinTone.MEDIUM_LIGHT, SkinTone.LIGHT): '\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f469\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f46d\U0001f3fc',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM): '\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f469\U0001f3fd',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM_DARK): '\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f469\U0001f3fe',
        (SkinTone.MEDIUM_LIGHT, SkinTone.DARK): '\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f469\U0001f3ff',
        (SkinTone.MEDIUM, SkinTone.LIGHT): '\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f469\U0001f3fb',
        (SkinTone.MEDIUM, SkinTone.MEDIUM_LIGHT): '\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f469\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f46d\U0001f3fd',
        (SkinTone.MEDIUM, SkinTone.MEDIUM_DARK): '\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f469\U0001f3fe',
        (SkinTone.MEDIUM, SkinTone.DARK): '\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f469\U0001f3ff',
        (SkinTone.MEDIUM_DARK, SkinTone.LIGHT): '\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f469\U0001f3fb',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM_LIGHT): '\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f469\U0001f3fc',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM): '\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f469\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f46d\U0001f3fe',
        (SkinTone.MEDIUM_DARK, SkinTone.DARK): '\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f469\U0001f3ff',
        (SkinTone.DARK, SkinTone.LIGHT): '\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f469\U0001f3fb',
        (SkinTone.DARK, SkinTone.MEDIUM_LIGHT): '\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f469\U0001f3fc',
        (SkinTone.DARK, SkinTone.MEDIUM): '\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f469\U0001f3fd',
        (SkinTone.DARK, SkinTone.MEDIUM_DARK): '\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f469\U0001f3fe',
        (SkinTone.DARK,): '\U0001f46d\U0001f3ff',
    },
    Emoji.WOMAN_AND_MAN_HOLDING_HANDS: {
        (SkinTone.LIGHT,): '\U0001f46b\U0001f3fb',
        (SkinTone.LIGHT, SkinTone.MEDIUM_LIGHT): '\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3fc',
        (SkinTone.LIGHT, SkinTone.MEDIUM): '\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3fd',
        (SkinTone.LIGHT, SkinTone.MEDIUM_DARK): '\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3fe',
        (SkinTone.LIGHT, SkinTone.DARK): '\U0001f469\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3ff',
        (SkinTone.MEDIUM_LIGHT, SkinTone.LIGHT): '\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f46b\U0001f3fc',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM): '\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3fd',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM_DARK): '\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3fe',
        (SkinTone.MEDIUM_LIGHT, SkinTone.DARK): '\U0001f469\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3ff',
        (SkinTone.MEDIUM, SkinTone.LIGHT): '\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3fb',
        (SkinTone.MEDIUM, SkinTone.MEDIUM_LIGHT): '\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f46b\U0001f3fd',
        (SkinTone.MEDIUM, SkinTone.MEDIUM_DARK): '\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3fe',
        (SkinTone.MEDIUM, SkinTone.DARK): '\U0001f469\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3ff',
        (SkinTone.MEDIUM_DARK, SkinTone.LIGHT): '\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3fb',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM_LIGHT): '\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3fc',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM): '\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f46b\U0001f3fe',
        (SkinTone.MEDIUM_DARK, SkinTone.DARK): '\U0001f469\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3ff',
        (SkinTone.DARK, SkinTone.LIGHT): '\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fb',
        (SkinTone.DARK, SkinTone.MEDIUM_LIGHT): '\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fc',
        (SkinTone.DARK, SkinTone.MEDIUM): '\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fd',
        (SkinTone.DARK, SkinTone.MEDIUM_DARK): '\U0001f469\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fe',
        (SkinTone.DARK,): '\U0001f46b\U0001f3ff',
    },
    Emoji.MEN_HOLDING_HANDS: {
        (SkinTone.LIGHT,): '\U0001f46c\U0001f3fb',
        (SkinTone.LIGHT, SkinTone.MEDIUM_LIGHT): '\U0001f468\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3fc',
        (SkinTone.LIGHT, SkinTone.MEDIUM): '\U0001f468\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3fd',
        (SkinTone.LIGHT, SkinTone.MEDIUM_DARK): '\U0001f468\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3fe',
        (SkinTone.LIGHT, SkinTone.DARK): '\U0001f468\U0001f3fb\u200d\U0001f91d\u200d\U0001f468\U0001f3ff',
        (SkinTone.MEDIUM_LIGHT, SkinTone.LIGHT): '\U0001f468\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f46c\U0001f3fc',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM): '\U0001f468\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3fd',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM_DARK): '\U0001f468\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3fe',
        (SkinTone.MEDIUM_LIGHT, SkinTone.DARK): '\U0001f468\U0001f3fc\u200d\U0001f91d\u200d\U0001f468\U0001f3ff',
        (SkinTone.MEDIUM, SkinTone.LIGHT): '\U0001f468\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3fb',
        (SkinTone.MEDIUM, SkinTone.MEDIUM_LIGHT): '\U0001f468\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f46c\U0001f3fd',
        (SkinTone.MEDIUM, SkinTone.MEDIUM_DARK): '\U0001f468\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3fe',
        (SkinTone.MEDIUM, SkinTone.DARK): '\U0001f468\U0001f3fd\u200d\U0001f91d\u200d\U0001f468\U0001f3ff',
        (SkinTone.MEDIUM_DARK, SkinTone.LIGHT): '\U0001f468\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3fb',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM_LIGHT): '\U0001f468\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3fc',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM): '\U0001f468\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f46c\U0001f3fe',
        (SkinTone.MEDIUM_DARK, SkinTone.DARK): '\U0001f468\U0001f3fe\u200d\U0001f91d\u200d\U0001f468\U0001f3ff',
        (SkinTone.DARK, SkinTone.LIGHT): '\U0001f468\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fb',
        (SkinTone.DARK, SkinTone.MEDIUM_LIGHT): '\U0001f468\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fc',
        (SkinTone.DARK, SkinTone.MEDIUM): '\U0001f468\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fd',
        (SkinTone.DARK, SkinTone.MEDIUM_DARK): '\U0001f468\U0001f3ff\u200d\U0001f91d\u200d\U0001f468\U0001f3fe',
        (SkinTone.DARK,): '\U0001f46c\U0001f3ff',
    },
    Emoji.KISS: {
        (SkinTone.LIGHT,): '\U0001f48f\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f48f\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f48f\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f48f\U0001f3fe',
        (SkinTone.DARK,): '\U0001f48f\U0001f3ff',
        (SkinTone.LIGHT, SkinTone.MEDIUM_LIGHT): '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fc',
        (SkinTone.LIGHT, SkinTone.MEDIUM): '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fd',
        (SkinTone.LIGHT, SkinTone.MEDIUM_DARK): '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fe',
        (SkinTone.LIGHT, SkinTone.DARK): '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3ff',
        (SkinTone.MEDIUM_LIGHT, SkinTone.LIGHT): '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM): '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fd',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM_DARK): '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fe',
        (SkinTone.MEDIUM_LIGHT, SkinTone.DARK): '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3ff',
        (SkinTone.MEDIUM, SkinTone.LIGHT): '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fb',
        (SkinTone.MEDIUM, SkinTone.MEDIUM_LIGHT): '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fc',
        (SkinTone.MEDIUM, SkinTone.MEDIUM_DARK): '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fe',
        (SkinTone.MEDIUM, SkinTone.DARK): '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3ff',
        (SkinTone.MEDIUM_DARK, SkinTone.LIGHT): '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fb',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM_LIGHT): '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fc',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM): '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fd',
        (SkinTone.MEDIUM_DARK, SkinTone.DARK): '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3ff',
        (SkinTone.DARK, SkinTone.LIGHT): '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fb',
        (SkinTone.DARK, SkinTone.MEDIUM_LIGHT): '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fc',
        (SkinTone.DARK, SkinTone.MEDIUM): '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fd',
        (SkinTone.DARK, SkinTone.MEDIUM_DARK): '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fe',
    },
    Emoji.KISS_WOMAN_MAN: {
        (SkinTone.LIGHT, SkinTone.LIGHT): '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb',
        (SkinTone.LIGHT, SkinTone.MEDIUM_LIGHT): '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc',
        (SkinTone.LIGHT, SkinTone.MEDIUM): '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd',
        (SkinTone.LIGHT, SkinTone.MEDIUM_DARK): '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe',
        (SkinTone.LIGHT, SkinTone.DARK): '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff',
        (SkinTone.MEDIUM_LIGHT, SkinTone.LIGHT): '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM_LIGHT): '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM): '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM_DARK): '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe',
        (SkinTone.MEDIUM_LIGHT, SkinTone.DARK): '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff',
        (SkinTone.MEDIUM, SkinTone.LIGHT): '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb',
        (SkinTone.MEDIUM, SkinTone.MEDIUM_LIGHT): '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc',
        (SkinTone.MEDIUM, SkinTone.MEDIUM): '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd',
        (SkinTone.MEDIUM, SkinTone.MEDIUM_DARK): '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe',
        (SkinTone.MEDIUM, SkinTone.DARK): '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff',
        (SkinTone.MEDIUM_DARK, SkinTone.LIGHT): '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM_LIGHT): '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM): '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM_DARK): '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe',
        (SkinTone.MEDIUM_DARK, SkinTone.DARK): '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff',
        (SkinTone.DARK, SkinTone.LIGHT): '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb',
        (SkinTone.DARK, SkinTone.MEDIUM_LIGHT): '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc',
        (SkinTone.DARK, SkinTone.MEDIUM): '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd',
        (SkinTone.DARK, SkinTone.MEDIUM_DARK): '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe',
        (SkinTone.DARK, SkinTone.DARK): '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff',
    },
    Emoji.KISS_MAN_MAN: {
        (SkinTone.LIGHT, SkinTone.LIGHT): '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb',
        (SkinTone.LIGHT, SkinTone.MEDIUM_LIGHT): '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc',
        (SkinTone.LIGHT, SkinTone.MEDIUM): '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd',
        (SkinTone.LIGHT, SkinTone.MEDIUM_DARK): '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe',
        (SkinTone.LIGHT, SkinTone.DARK): '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff',
        (SkinTone.MEDIUM_LIGHT, SkinTone.LIGHT): '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM_LIGHT): '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM): '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM_DARK): '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe',
        (SkinTone.MEDIUM_LIGHT, SkinTone.DARK): '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff',
        (SkinTone.MEDIUM, SkinTone.LIGHT): '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb',
        (SkinTone.MEDIUM, SkinTone.MEDIUM_LIGHT): '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc',
        (SkinTone.MEDIUM, SkinTone.MEDIUM): '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd',
        (SkinTone.MEDIUM, SkinTone.MEDIUM_DARK): '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe',
        (SkinTone.MEDIUM, SkinTone.DARK): '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff',
        (SkinTone.MEDIUM_DARK, SkinTone.LIGHT): '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM_LIGHT): '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM): '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM_DARK): '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe',
        (SkinTone.MEDIUM_DARK, SkinTone.DARK): '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff',
        (SkinTone.DARK, SkinTone.LIGHT): '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fb',
        (SkinTone.DARK, SkinTone.MEDIUM_LIGHT): '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fc',
        (SkinTone.DARK, SkinTone.MEDIUM): '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fd',
        (SkinTone.DARK, SkinTone.MEDIUM_DARK): '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3fe',
        (SkinTone.DARK, SkinTone.DARK): '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468\U0001f3ff',
    },
    Emoji.KISS_WOMAN_WOMAN: {
        (SkinTone.LIGHT, SkinTone.LIGHT): '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fb',
        (SkinTone.LIGHT, SkinTone.MEDIUM_LIGHT): '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fc',
        (SkinTone.LIGHT, SkinTone.MEDIUM): '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fd',
        (SkinTone.LIGHT, SkinTone.MEDIUM_DARK): '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fe',
        (SkinTone.LIGHT, SkinTone.DARK): '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3ff',
        (SkinTone.MEDIUM_LIGHT, SkinTone.LIGHT): '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM_LIGHT): '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fc',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM): '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fd',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM_DARK): '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fe',
        (SkinTone.MEDIUM_LIGHT, SkinTone.DARK): '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3ff',
        (SkinTone.MEDIUM, SkinTone.LIGHT): '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fb',
        (SkinTone.MEDIUM, SkinTone.MEDIUM_LIGHT): '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fc',
        (SkinTone.MEDIUM, SkinTone.MEDIUM): '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fd',
        (SkinTone.MEDIUM, SkinTone.MEDIUM_DARK): '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fe',
        (SkinTone.MEDIUM, SkinTone.DARK): '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3ff',
        (SkinTone.MEDIUM_DARK, SkinTone.LIGHT): '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fb',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM_LIGHT): '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fc',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM): '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fd',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM_DARK): '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fe',
        (SkinTone.MEDIUM_DARK, SkinTone.DARK): '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3ff',
        (SkinTone.DARK, SkinTone.LIGHT): '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fb',
        (SkinTone.DARK, SkinTone.MEDIUM_LIGHT): '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fc',
        (SkinTone.DARK, SkinTone.MEDIUM): '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fd',
        (SkinTone.DARK, SkinTone.MEDIUM_DARK): '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3fe',
        (SkinTone.DARK, SkinTone.DARK): '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469\U0001f3ff',
    },
    Emoji.COUPLE_WITH_HEART: {
        (SkinTone.LIGHT,): '\U0001f491\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT,): '\U0001f491\U0001f3fc',
        (SkinTone.MEDIUM,): '\U0001f491\U0001f3fd',
        (SkinTone.MEDIUM_DARK,): '\U0001f491\U0001f3fe',
        (SkinTone.DARK,): '\U0001f491\U0001f3ff',
        (SkinTone.LIGHT, SkinTone.MEDIUM_LIGHT): '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fc',
        (SkinTone.LIGHT, SkinTone.MEDIUM): '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fd',
        (SkinTone.LIGHT, SkinTone.MEDIUM_DARK): '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fe',
        (SkinTone.LIGHT, SkinTone.DARK): '\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3ff',
        (SkinTone.MEDIUM_LIGHT, SkinTone.LIGHT): '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM): '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fd',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM_DARK): '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fe',
        (SkinTone.MEDIUM_LIGHT, SkinTone.DARK): '\U0001f9d1\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3ff',
        (SkinTone.MEDIUM, SkinTone.LIGHT): '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fb',
        (SkinTone.MEDIUM, SkinTone.MEDIUM_LIGHT): '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fc',
        (SkinTone.MEDIUM, SkinTone.MEDIUM_DARK): '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fe',
        (SkinTone.MEDIUM, SkinTone.DARK): '\U0001f9d1\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3ff',
        (SkinTone.MEDIUM_DARK, SkinTone.LIGHT): '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fb',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM_LIGHT): '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fc',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM): '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fd',
        (SkinTone.MEDIUM_DARK, SkinTone.DARK): '\U0001f9d1\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3ff',
        (SkinTone.DARK, SkinTone.LIGHT): '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fb',
        (SkinTone.DARK, SkinTone.MEDIUM_LIGHT): '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fc',
        (SkinTone.DARK, SkinTone.MEDIUM): '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fd',
        (SkinTone.DARK, SkinTone.MEDIUM_DARK): '\U0001f9d1\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f9d1\U0001f3fe',
    },
    Emoji.COUPLE_WITH_HEART_WOMAN_MAN: {
        (SkinTone.LIGHT, SkinTone.LIGHT): '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb',
        (SkinTone.LIGHT, SkinTone.MEDIUM_LIGHT): '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc',
        (SkinTone.LIGHT, SkinTone.MEDIUM): '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd',
        (SkinTone.LIGHT, SkinTone.MEDIUM_DARK): '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe',
        (SkinTone.LIGHT, SkinTone.DARK): '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff',
        (SkinTone.MEDIUM_LIGHT, SkinTone.LIGHT): '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM_LIGHT): '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM): '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM_DARK): '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe',
        (SkinTone.MEDIUM_LIGHT, SkinTone.DARK): '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff',
        (SkinTone.MEDIUM, SkinTone.LIGHT): '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb',
        (SkinTone.MEDIUM, SkinTone.MEDIUM_LIGHT): '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc',
        (SkinTone.MEDIUM, SkinTone.MEDIUM): '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd',
        (SkinTone.MEDIUM, SkinTone.MEDIUM_DARK): '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe',
        (SkinTone.MEDIUM, SkinTone.DARK): '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff',
        (SkinTone.MEDIUM_DARK, SkinTone.LIGHT): '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM_LIGHT): '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM): '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM_DARK): '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe',
        (SkinTone.MEDIUM_DARK, SkinTone.DARK): '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff',
        (SkinTone.DARK, SkinTone.LIGHT): '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb',
        (SkinTone.DARK, SkinTone.MEDIUM_LIGHT): '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc',
        (SkinTone.DARK, SkinTone.MEDIUM): '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd',
        (SkinTone.DARK, SkinTone.MEDIUM_DARK): '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe',
        (SkinTone.DARK, SkinTone.DARK): '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff',
    },
    Emoji.COUPLE_WITH_HEART_MAN_MAN: {
        (SkinTone.LIGHT, SkinTone.LIGHT): '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb',
        (SkinTone.LIGHT, SkinTone.MEDIUM_LIGHT): '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc',
        (SkinTone.LIGHT, SkinTone.MEDIUM): '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd',
        (SkinTone.LIGHT, SkinTone.MEDIUM_DARK): '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe',
        (SkinTone.LIGHT, SkinTone.DARK): '\U0001f468\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff',
        (SkinTone.MEDIUM_LIGHT, SkinTone.LIGHT): '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM_LIGHT): '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM): '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM_DARK): '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe',
        (SkinTone.MEDIUM_LIGHT, SkinTone.DARK): '\U0001f468\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff',
        (SkinTone.MEDIUM, SkinTone.LIGHT): '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb',
        (SkinTone.MEDIUM, SkinTone.MEDIUM_LIGHT): '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc',
        (SkinTone.MEDIUM, SkinTone.MEDIUM): '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd',
        (SkinTone.MEDIUM, SkinTone.MEDIUM_DARK): '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe',
        (SkinTone.MEDIUM, SkinTone.DARK): '\U0001f468\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff',
        (SkinTone.MEDIUM_DARK, SkinTone.LIGHT): '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM_LIGHT): '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM): '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM_DARK): '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe',
        (SkinTone.MEDIUM_DARK, SkinTone.DARK): '\U0001f468\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff',
        (SkinTone.DARK, SkinTone.LIGHT): '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fb',
        (SkinTone.DARK, SkinTone.MEDIUM_LIGHT): '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fc',
        (SkinTone.DARK, SkinTone.MEDIUM): '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fd',
        (SkinTone.DARK, SkinTone.MEDIUM_DARK): '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3fe',
        (SkinTone.DARK, SkinTone.DARK): '\U0001f468\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f468\U0001f3ff',
    },
    Emoji.COUPLE_WITH_HEART_WOMAN_WOMAN: {
        (SkinTone.LIGHT, SkinTone.LIGHT): '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fb',
        (SkinTone.LIGHT, SkinTone.MEDIUM_LIGHT): '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fc',
        (SkinTone.LIGHT, SkinTone.MEDIUM): '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fd',
        (SkinTone.LIGHT, SkinTone.MEDIUM_DARK): '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fe',
        (SkinTone.LIGHT, SkinTone.DARK): '\U0001f469\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3ff',
        (SkinTone.MEDIUM_LIGHT, SkinTone.LIGHT): '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fb',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM_LIGHT): '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fc',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM): '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fd',
        (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM_DARK): '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fe',
        (SkinTone.MEDIUM_LIGHT, SkinTone.DARK): '\U0001f469\U0001f3fc\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3ff',
        (SkinTone.MEDIUM, SkinTone.LIGHT): '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fb',
        (SkinTone.MEDIUM, SkinTone.MEDIUM_LIGHT): '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fc',
        (SkinTone.MEDIUM, SkinTone.MEDIUM): '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fd',
        (SkinTone.MEDIUM, SkinTone.MEDIUM_DARK): '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fe',
        (SkinTone.MEDIUM, SkinTone.DARK): '\U0001f469\U0001f3fd\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3ff',
        (SkinTone.MEDIUM_DARK, SkinTone.LIGHT): '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fb',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM_LIGHT): '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fc',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM): '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fd',
        (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM_DARK): '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fe',
        (SkinTone.MEDIUM_DARK, SkinTone.DARK): '\U0001f469\U0001f3fe\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3ff',
        (SkinTone.DARK, SkinTone.LIGHT): '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fb',
        (SkinTone.DARK, SkinTone.MEDIUM_LIGHT): '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fc',
        (SkinTone.DARK, SkinTone.MEDIUM): '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fd',
        (SkinTone.DARK, SkinTone.MEDIUM_DARK): '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3fe',
        (SkinTone.DARK, SkinTone.DARK): '\U0001f469\U0001f3ff\u200d\u2764\ufe0f\u200d\U0001f469\U0001f3ff',
    },
}

CATEGORIES: Final[dict[EmojiCategory, tuple[Emoji, ...]]] = {
    EmojiCategory.SMILEYS_AND_EMOTION: (
        Emoji.GRINNING_FACE,
        Emoji.GRINNING_FACE_WITH_BIG_EYES,
        Emoji.GRINNING_FACE_WITH_SMILING_EYES,
        Emoji.BEAMING_FACE_WITH_SMILING_EYES,
        Emoji.GRINNING_SQUINTING_FACE,
        Emoji.GRINNING_FACE_WITH_SWEAT,
        Emoji.ROLLING_ON_THE_FLOOR_LAUGHING,
        Emoji.FACE_WITH_TEARS_OF_JOY,
        Emoji.SLIGHTLY_SMILING_FACE,
        Emoji.UPSIDE_DOWN_FACE,
        Emoji.MELTING_FACE,
        Emoji.WINKING_FACE,
        Emoji.SMILING_FACE_WITH_SMILING_EYES,
        Emoji.SMILING_FACE_WITH_HALO,
        Emoji.SMILING_FACE_WITH_HEARTS,
        Emoji.SMILING_FACE_WITH_HEART_EYES,
        Emoji.STAR_STRUCK,
        Emoji.FACE_BLOWING_A_KISS,
        Emoji.KISSING_FACE,
        Emoji.SMILING_FACE,
        Emoji.KISSING_FACE_WITH_CLOSED_EYES,
        Emoji.KISSING_FACE_WITH_SMILING_EYES,
        Emoji.SMILING_FACE_WITH_TEAR,
        Emoji.FACE_SAVORING_FOOD,
        Emoji.FACE_WITH_TONGUE,
        Emoji.WINKING_FACE_WITH_TONGUE,
        Emoji.ZANY_FACE,
        Emoji.SQUINTING_FACE_WITH_TONGUE,
        Emoji.MONEY_MOUTH_FACE,
        Emoji.SMILING_FACE_WITH_OPEN_HANDS,
        Emoji.FACE_WITH_HAND_OVER_MOUTH,
        Emoji.FACE_WITH_OPEN_EYES_AND_HAND_OVER_MOUTH,
        Emoji.FACE_WITH_PEEKING_EYE,
        Emoji.SHUSHING_FACE,
        Emoji.THINKING_FACE,
        Emoji.SALUTING_FACE,
        Emoji.ZIPPER_MOUTH_FACE,
        Emoji.FACE_WITH_RAISED_EYEBROW,
        Emoji.NEUTRAL_FACE,
        Emoji.EXPRESSIONLESS_FACE,
        Emoji.FACE_WITHOUT_MOUTH,
        Emoji.DOTTED_LINE_FACE,
        Emoji.FACE_IN_CLOUDS,
        Emoji.SMIRKING_FACE,
        Emoji.UNAMUSED_FACE,
        Emoji.FACE_WITH_ROLLING_EYES,
        Emoji.GRIMACING_FACE,
        Emoji.FACE_EXHALING,
        Emoji.LYING_FACE,
        Emoji.SHAKING_FACE,
        Emoji.HEAD_SHAKING_HORIZONTALLY,
        Emoji.HEAD_SHAKING_VERTICALLY,
        Emoji.RELIEVED_FACE,
        Emoji.PENSIVE_FACE,
        Emoji.SLEEPY_FACE,
        Emoji.DROOLING_FACE,
        Emoji.SLEEPING_FACE,
        Emoji.FACE_WITH_MEDICAL_MASK,
        Emoji.FACE_WITH_THERMOMETER,
        Emoji.FACE_WITH_HEAD_BANDAGE,
        Emoji.NAUSEATED_FACE,
        Emoji.FACE_VOMITING,
        Emoji.SNEEZING_FACE,
        Emoji.HOT_FACE,
        Emoji.COLD_FACE,
        Emoji.WOOZY_FACE,
        Emoji.FACE_WITH_CROSSED_OUT_EYES,
        Emoji.FACE_WITH_SPIRAL_EYES,
        Emoji.EXPLODING_HEAD,
        Emoji.COWBOY_HAT_FACE,
        Emoji.PARTYING_FACE,
        Emoji.DISGUISED_FACE,
        Emoji.SMILING_FACE_WITH_SUNGLASSES,
        Emoji.NERD_FACE,
        Emoji.FACE_WITH_MONOCLE,
        Emoji.CONFUSED_FACE,
        Emoji.FACE_WITH_DIAGONAL_MOUTH,
        Emoji.WORRIED_FACE,
        Emoji.SLIGHTLY_FROWNING_FACE,
        Emoji.FROWNING_FACE,
        Emoji.FACE_WITH_OPEN_MOUTH,
        Emoji.HUSHED_FACE,
        Emoji.ASTONISHED_FACE,
        Emoji.FLUSHED_FACE,
        Emoji.PLEADING_FACE,
        Emoji.FACE_HOLDING_BACK_TEARS,
        Emoji.FROWNING_FACE_WITH_OPEN_MOUTH,
        Emoji.ANGUISHED_FACE,
        Emoji.FEARFUL_FACE,
        Emoji.ANXIOUS_FACE_WITH_SWEAT,
        Emoji.SAD_BUT_RELIEVED_FACE,
        Emoji.CRYING_FACE,
        Emoji.LOUDLY_CRYING_FACE,
        Emoji.FACE_SCREAMING_IN_FEAR,
        Emoji.CONFOUNDED_FACE,
        Emoji.PERSEVERING_FACE,
        Emoji.DISAPPOINTED_FACE,
        Emoji.DOWNCAST_FACE_WITH_SWEAT,
        Emoji.WEARY_FACE,
        Emoji.TIRED_FACE,
        Emoji.YAWNING_FACE,
        Emoji.FACE_WITH_STEAM_FROM_NOSE,
        Emoji.ENRAGED_FACE,
        Emoji.ANGRY_FACE,
        Emoji.FACE_WITH_SYMBOLS_ON_MOUTH,
        Emoji.SMILING_FACE_WITH_HORNS,
        Emoji.ANGRY_FACE_WITH_HORNS,
        Emoji.SKULL,
        Emoji.SKULL_AND_CROSSBONES,
        Emoji.PILE_OF_POO,
        Emoji.CLOWN_FACE,
        Emoji.OGRE,
        Emoji.GOBLIN,
        Emoji.GHOST,
        Emoji.ALIEN,
        Emoji.ALIEN_MONSTER,
        Emoji.ROBOT,
        Emoji.GRINNING_CAT,
        Emoji.GRINNING_CAT_WITH_SMILING_EYES,
        Emoji.CAT_WITH_TEARS_OF_JOY,
        Emoji.SMILING_CAT_WITH_HEART_EYES,
        Emoji.CAT_WITH_WRY_SMILE,
        Emoji.KISSING_CAT,
        Emoji.WEARY_CAT,
        Emoji.CRYING_CAT,
        Emoji.POUTING_CAT,
        Emoji.SEE_NO_EVIL_MONKEY,
        Emoji.HEAR_NO_EVIL_MONKEY,
        Emoji.SPEAK_NO_EVIL_MONKEY,
        Emoji.LOVE_LETTER,
        Emoji.HEART_WITH_ARROW,
        Emoji.HEART_WITH_RIBBON,
        Emoji.SPARKLING_HEART,
        Emoji.GROWING_HEART,
        Emoji.BEATING_HEART,
        Emoji.REVOLVING_HEARTS,
        Emoji.TWO_HEARTS,
        Emoji.HEART_DECORATION,
        Emoji.HEART_EXCLAMATION,
        Emoji.BROKEN_HEART,
        Emoji.HEART_ON_FIRE,
        Emoji.MENDING_HEART,
        Emoji.RED_HEART,
        Emoji.PINK_HEART,
        Emoji.ORANGE_HEART,
        Emoji.YELLOW_HEART,
        Emoji.GREEN_HEART,
        Emoji.BLUE_HEART,
        Emoji.LIGHT_BLUE_HEART,
        Emoji.PURPLE_HEART,
        Emoji.BROWN_HEART,
        Emoji.BLACK_HEART,
        Emoji.GREY_HEART,
        Emoji.WHITE_HEART,
        Emoji.KISS_MARK,
        Emoji.HUNDRED_POINTS,
        Emoji.ANGER_SYMBOL,
        Emoji.COLLISION,
        Emoji.DIZZY,
        Emoji.SWEAT_DROPLETS,
        Emoji.DASHING_AWAY,
        Emoji.HOLE,
        Emoji.SPEECH_BALLOON,
        Emoji.EYE_IN_SPEECH_BUBBLE,
        Emoji.LEFT_SPEECH_BUBBLE,
        Emoji.RIGHT_ANGER_BUBBLE,
        Emoji.THOUGHT_BALLOON,
        Emoji.ZZZ,
    ),
    EmojiCategory.PEOPLE_AND_BODY: (
        Emoji.WAVING_HAND,
        Emoji.RAISED_BACK_OF_HAND,
        Emoji.HAND_WITH_FINGERS_SPLAYED,
        Emoji.RAISED_HAND,
        Emoji.VULCAN_SALUTE,
        Emoji.RIGHTWARDS_HAND,
        Emoji.LEFTWARDS_HAND,
        Emoji.PALM_DOWN_HAND,
        Emoji.PALM_UP_HAND,
        Emoji.LEFTWARDS_PUSHING_HAND,
        Emoji.RIGHTWARDS_PUSHING_HAND,
        Emoji.OK_HAND,
        Emoji.PINCHED_FINGERS,
        Emoji.PINCHING_HAND,
        Emoji.VICTORY_HAND,
        Emoji.CROSSED_FINGERS,
        Emoji.HAND_WITH_INDEX_FINGER_AND_THUMB_CROSSED,
        Emoji.LOVE_YOU_GESTURE,
        Emoji.SIGN_OF_THE_HORNS,
        Emoji.CALL_ME_HAND,
        Emoji.BACKHAND_INDEX_POINTING_LEFT,
        Emoji.BACKHAND_INDEX_POINTING_RIGHT,
        Emoji.BACKHAND_INDEX_POINTING_UP,
        Emoji.MIDDLE_FINGER,
        Emoji.BACKHAND_INDEX_POINTING_DOWN,
        Emoji.INDEX_POINTING_UP,
        Emoji.INDEX_POINTING_AT_THE_VIEWER,
        Emoji.THUMBS_UP,
        Emoji.THUMBS_DOWN,
        Emoji.RAISED_FIST,
        Emoji.ONCOMING_FIST,
        Emoji.LEFT_FACING_FIST,
        Emoji.RIGHT_FACING_FIST,
        Emoji.CLAPPING_HANDS,
        Emoji.RAISING_HANDS,
        Emoji.HEART_HANDS,
        Emoji.OPEN_HANDS,
        Emoji.PALMS_UP_TOGETHER,
        Emoji.HANDSHAKE,
        Emoji.FOLDED_HANDS,
        Emoji.WRITING_HAND,
        Emoji.NAIL_POLISH,
        Emoji.SELFIE,
        Emoji.FLEXED_BICEPS,
        Emoji.MECHANICAL_ARM,
        Emoji.MECHANICAL_LEG,
        Emoji.LEG,
        Emoji.FOOT,
        Emoji.EAR,
        Emoji.EAR_WITH_HEARING_AID,
        Emoji.NOSE,
        Emoji.BRAIN,
        Emoji.ANATOMICAL_HEART,
        Emoji.LUNGS,
        Emoji.TOOTH,
        Emoji.BONE,
        Emoji.EYES,
        Emoji.EYE,
        Emoji.TONGUE,
        Emoji.MOUTH,
        Emoji.BITING_LIP,
        Emoji.BABY,
        Emoji.CHILD,
        Emoji.BOY,
        Emoji.GIRL,
        Emoji.PERSON,
        Emoji.PERSON_BLOND_HAIR,
        Emoji.MAN,
        Emoji.PERSON_BEARD,
        Emoji.MAN_BEARD,
        Emoji.WOMAN_BEARD,
        Emoji.MAN_RED_HAIR,
        Emoji.MAN_CURLY_HAIR,
        Emoji.MAN_WHITE_HAIR,
        Emoji.MAN_BALD,
        Emoji.WOMAN,
        Emoji.WOMAN_RED_HAIR,
        Emoji.PERSON_RED_HAIR,
        Emoji.WOMAN_CURLY_HAIR,
        Emoji.PERSON_CURLY_HAIR,
        Emoji.WOMAN_WHITE_HAIR,
        Emoji.PERSON_WHITE_HAIR,
        Emoji.WOMAN_BALD,
        Emoji.PERSON_BALD,
        Emoji.WOMAN_BLOND_HAIR,
        Emoji.MAN_BLOND_HAIR,
        Emoji.OLDER_PERSON,
        Emoji.OLD_MAN,
        Emoji.OLD_WOMAN,
        Emoji.PERSON_FROWNING,
        Emoji.MAN_FROWNING,
        Emoji.WOMAN_FROWNING,
        Emoji.PERSON_POUTING,
        Emoji.MAN_POUTING,
        Emoji.WOMAN_POUTING,
        Emoji.PERSON_GESTURING_NO,
        Emoji.MAN_GESTURING_NO,
        Emoji.WOMAN_GESTURING_NO,
        Emoji.PERSON_GESTURING_OK,
        Emoji.MAN_GESTURING_OK,
        Emoji.WOMAN_GESTURING_OK,
        Emoji.PERSON_TIPPING_HAND,
        Emoji.MAN_TIPPING_HAND,
        Emoji.WOMAN_TIPPING_HAND,
        Emoji.PERSON_RAISING_HAND,
        Emoji.MAN_RAISING_HAND,
        Emoji.WOMAN_RAISING_HAND,
        Emoji.DEAF_PERSON,
        Emoji.DEAF_MAN,
        Emoji.DEAF_WOMAN,
        Emoji.PERSON_BOWING,
        Emoji.MAN_BOWING,
        Emoji.WOMAN_BOWING,
        Emoji.PERSON_FACEPALMING,
        Emoji.MAN_FACEPALMING,
        Emoji.WOMAN_FACEPALMING,
        Emoji.PERSON_SHRUGGING,
        Emoji.MAN_SHRUGGING,
        Emoji.WOMAN_SHRUGGING,
        Emoji.HEALTH_WORKER,
        Emoji.MAN_HEALTH_WORKER,
        Emoji.WOMAN_HEALTH_WORKER,
        Emoji.STUDENT,
        Emoji.MAN_STUDENT,
        Emoji.WOMAN_STUDENT,
        Emoji.TEACHER,
        Emoji.MAN_TEACHER,
        Emoji.WOMAN_TEACHER,
        Emoji.JUDGE,
        Emoji.MAN_JUDGE,
        Emoji.WOMAN_JUDGE,
        Emoji.FARMER,
        Emoji.MAN_FARMER,
        Emoji.WOMAN_FARMER,
        Emoji.COOK,
        Emoji.MAN_COOK,
        Emoji.WOMAN_COOK,
        Emoji.MECHANIC,
        Emoji.MAN_MECHANIC,
        Emoji.WOMAN_MECHANIC,
        Emoji.FACTORY_WORKER,
        Emoji.MAN_FACTORY_WORKER,
        Emoji.WOMAN_FACTORY_WORKER,
        Emoji.OFFICE_WORKER,
        Emoji.MAN_OFFICE_WORKER,
        Emoji.WOMAN_OFFICE_WORKER,
        Emoji.SCIENTIST,
        Emoji.MAN_SCIENTIST,
        Emoji.WOMAN_SCIENTIST,
        Emoji.TECHNOLOGIST,
        Emoji.MAN_TECHNOLOGIST,
        Emoji.WOMAN_TECHNOLOGIST,
        Emoji.SINGER,
        Emoji.MAN_SINGER,
        Emoji.WOMAN_SINGER,
        Emoji.ARTIST,
        Emoji.MAN_ARTIST,
        Emoji.WOMAN_ARTIST,
        Emoji.PILOT,
        Emoji.MAN_PILOT,
        Emoji.WOMAN_PILOT,
        Emoji.ASTRONAUT,
        Emoji.MAN_ASTRONAUT,
        Emoji.WOMAN_ASTRONAUT,
        Emoji.FIREFIGHTER,
        Emoji.MAN_FIREFIGHTER,
        Emoji.WOMAN_FIREFIGHTER,
        Emoji.POLICE_OFFICER,
        Emoji.MAN_POLICE_OFFICER,
        Emoji.WOMAN_POLICE_OFFICER,
        Emoji.DETECTIVE,
        Emoji.MAN_DETECTIVE,
        Emoji.WOMAN_DETECTIVE,
        Emoji.GUARD,
        Emoji.MAN_GUARD,
        Emoji.WOMAN_GUARD,
        Emoji.NINJA,
        Emoji.CONSTRUCTION_WORKER,
        Emoji.MAN_CONSTRUCTION_WORKER,
        Emoji.WOMAN_CONSTRUCTION_WORKER,
        Emoji.PERSON_WITH_CROWN,
        Emoji.PRINCE,
        Emoji.PRINCESS,
        Emoji.PERSON_WEARING_TURBAN,
        Emoji.MAN_WEARING_TURBAN,
        Emoji.WOMAN_WEARING_TURBAN,
        Emoji.PERSON_WITH_SKULLCAP,
        Emoji.WOMAN_WITH_HEADSCARF,
        Emoji.PERSON_IN_TUXEDO,
        Emoji.MAN_IN_TUXEDO,
        Emoji.WOMAN_IN_TUXEDO,
        Emoji.PERSON_WITH_VEIL,
        Emoji.MAN_WITH_VEIL,
        Emoji.WOMAN_WITH_VEIL,
        Emoji.PREGNANT_WOMAN,
        Emoji.PREGNANT_MAN,
        Emoji.PREGNANT_PERSON,
        Emoji.BREAST_FEEDING,
        Emoji.WOMAN_FEEDING_BABY,
        Emoji.MAN_FEEDING_BABY,
        Emoji.PERSON_FEEDING_BABY,
        Emoji.BABY_ANGEL,
        Emoji.SANTA_CLAUS,
        Emoji.MRS_CLAUS,
        Emoji.MX_CLAUS,
        Emoji.SUPERHERO,
        Emoji.MAN_SUPERHERO,
        Emoji.WOMAN_SUPERHERO,
        Emoji.SUPERVILLAIN,
        Emoji.MAN_SUPERVILLAIN,
        Emoji.WOMAN_SUPERVILLAIN,
        Emoji.MAGE,
        Emoji.MAN_MAGE,
        Emoji.WOMAN_MAGE,
        Emoji.FAIRY,
        Emoji.MAN_FAIRY,
        Emoji.WOMAN_FAIRY,
        Emoji.VAMPIRE,
        Emoji.MAN_VAMPIRE,
        Emoji.WOMAN_VAMPIRE,
        Emoji.MERPERSON,
        Emoji.MERMAN,
        Emoji.MERMAID,
        Emoji.ELF,
        Emoji.MAN_ELF,
        Emoji.WOMAN_ELF,
        Emoji.GENIE,
        Emoji.MAN_GENIE,
        Emoji.WOMAN_GENIE,
        Emoji.ZOMBIE,
        Emoji.MAN_ZOMBIE,
        Emoji.WOMAN_ZOMBIE,
        Emoji.TROLL,
        Emoji.PERSON_GETTING_MASSAGE,
        Emoji.MAN_GETTING_MASSAGE,
        Emoji.WOMAN_GETTING_MASSAGE,
        Emoji.PERSON_GETTING_HAIRCUT,
        Emoji.MAN_GETTING_HAIRCUT,
        Emoji.WOMAN_GETTING_HAIRCUT,
        Emoji.PERSON_WALKING,
        Emoji.MAN_WALKING,
        Emoji.WOMAN_WALKING,
        Emoji.PERSON_WALKING_FACING_RIGHT,
        Emoji.WOMAN_WALKING_FACING_RIGHT,
        Emoji.MAN_WALKING_FACING_RIGHT,
        Emoji.PERSON_STANDING,
        Emoji.MAN_STANDING,
        Emoji.WOMAN_STANDING,
        Emoji.PERSON_KNEELING,
        Emoji.MAN_KNEELING,
        Emoji.WOMAN_KNEELING,
        Emoji.PERSON_KNEELING_FACING_RIGHT,
        Emoji.WOMAN_KNEELING_FACING_RIGHT,
        Emoji.MAN_KNEELING_FACING_RIGHT,
        Emoji.PERSON_WITH_WHITE_CANE,
        Emoji.PERSON_WITH_WHITE_CANE_FACING_RIGHT,
        Emoji.MAN_WITH_WHITE_CANE,
        Emoji.MAN_WITH_WHITE_CANE_FACING_RIGHT,
        Emoji.WOMAN_WITH_WHITE_CANE,
        Emoji.WOMAN_WITH_WHITE_CANE_FACING_RIGHT,
        Emoji.PERSON_IN_MOTORIZED_WHEELCHAIR,
        Emoji.PERSON_IN_MOTORIZED_WHEELCHAIR_FACING_RIGHT,
        Emoji.MAN_IN_MOTORIZED_WHEELCHAIR,
        Emoji.MAN_IN_MOTORIZED_WHEELCHAIR_FACING_RIGHT,
        Emoji.WOMAN_IN_MOTORIZED_WHEELCHAIR,
        Emoji.WOMAN_IN_MOTORIZED_WHEELCHAIR_FACING_RIGHT,
        Emoji.PERSON_IN_MANUAL_WHEELCHAIR,
        Emoji.PERSON_IN_MANUAL_WHEELCHAIR_FACING_RIGHT,
        Emoji.MAN_IN_MANUAL_WHEELCHAIR,
        Emoji.MAN_IN_MANUAL_WHEELCHAIR_FACING_RIGHT,
        Emoji.WOMAN_IN_MANUAL_WHEELCHAIR,
        Emoji.WOMAN_IN_MANUAL_WHEELCHAIR_FACING_RIGHT,
        Emoji.PERSON_RUNNING,
        Emoji.MAN_RUNNING,
        Emoji.WOMAN_RUNNING,
        Emoji.PERSON_RUNNING_FACING_RIGHT,
        Emoji.WOMAN_RUNNING_FACING_RIGHT,
        Emoji.MAN_RUNNING_FACING_RIGHT,
        Emoji.WOMAN_DANCING,
        Emoji.MAN_DANCING,
        Emoji.PERSON_IN_SUIT_LEVITATING,
        Emoji.PEOPLE_WITH_BUNNY_EARS,
        Emoji.MEN_WITH_BUNNY_EARS,
        Emoji.WOMEN_WITH_BUNNY_EARS,
        Emoji.PERSON_IN_STEAMY_ROOM,
        Emoji.MAN_IN_STEAMY_ROOM,
        Emoji.WOMAN_IN_STEAMY_ROOM,
        Emoji.PERSON_CLIMBING,
        Emoji.MAN_CLIMBING,
        Emoji.WOMAN_CLIMBING,
        Emoji.PERSON_FENCING,
        Emoji.HORSE_RACING,
        Emoji.SKIER,
        Emoji.SNOWBOARDER,
        Emoji.PERSON_GOLFING,
        Emoji.MAN_GOLFING,
        Emoji.WOMAN_GOLFING,
        Emoji.PERSON_SURFING,
        Emoji.MAN_SURFING,
        Emoji.WOMAN_SURFING,
        Emoji.PERSON_ROWING_BOAT,
        Emoji.MAN_ROWING_BOAT,
        Emoji.WOMAN_ROWING_BOAT,
        Emoji.PERSON_SWIMMING,
        Emoji.MAN_SWIMMING,
        Emoji.WOMAN_SWIMMING,
        Emoji.PERSON_BOUNCING_BALL,
        Emoji.MAN_BOUNCING_BALL,
        Emoji.WOMAN_BOUNCING_BALL,
        Emoji.PERSON_LIFTING_WEIGHTS,
        Emoji.MAN_LIFTING_WEIGHTS,
        Emoji.WOMAN_LIFTING_WEIGHTS,
        Emoji.PERSON_BIKING,
        Emoji.MAN_BIKING,
        Emoji.WOMAN_BIKING,
        Emoji.PERSON_MOUNTAIN_BIKING,
        Emoji.MAN_MOUNTAIN_BIKING,
        Emoji.WOMAN_MOUNTAIN_BIKING,
        Emoji.PERSON_CARTWHEELING,
        Emoji.MAN_CARTWHEELING,
        Emoji.WOMAN_CARTWHEELING,
        Emoji.PEOPLE_WRESTLING,
        Emoji.MEN_WRESTLING,
        Emoji.WOMEN_WRESTLING,
        Emoji.PERSON_PLAYING_WATER_POLO,
        Emoji.MAN_PLAYING_WATER_POLO,
        Emoji.WOMAN_PLAYING_WATER_POLO,
        Emoji.PERSON_PLAYING_HANDBALL,
        Emoji.MAN_PLAYING_HANDBALL,
        Emoji.WOMAN_PLAYING_HANDBALL,
        Emoji.PERSON_JUGGLING,
        Emoji.MAN_JUGGLING,
        Emoji.WOMAN_JUGGLING,
        Emoji.PERSON_IN_LOTUS_POSITION,
        Emoji.MAN_IN_LOTUS_POSITION,
        Emoji.WOMAN_IN_LOTUS_POSITION,
        Emoji.PERSON_TAKING_BATH,
        Emoji.PERSON_IN_BED,
        Emoji.PEOPLE_HOLDING_HANDS,
        Emoji.WOMEN_HOLDING_HANDS,
        Emoji.WOMAN_AND_MAN_HOLDING_HANDS,
        Emoji.MEN_HOLDING_HANDS,
        Emoji.KISS,
        Emoji.KISS_WOMAN_MAN,
        Emoji.KISS_MAN_MAN,
        Emoji.KISS_WOMAN_WOMAN,
        Emoji.COUPLE_WITH_HEART,
        Emoji.COUPLE_WITH_HEART_WOMAN_MAN,
        Emoji.COUPLE_WITH_HEART_MAN_MAN,
        Emoji.COUPLE_WITH_HEART_WOMAN_WOMAN,
        Emoji.FAMILY_MAN_WOMAN_BOY,
        Emoji.FAMILY_MAN_WOMAN_GIRL,
        Emoji.FAMILY_MAN_WOMAN_GIRL_BOY,
        Emoji.FAMILY_MAN_WOMAN_BOY_BOY,
        Emoji.FAMILY_MAN_WOMAN_GIRL_GIRL,
        Emoji.FAMILY_MAN_MAN_BOY,
        Emoji.FAMILY_MAN_MAN_GIRL,
        Emoji.FAMILY_MAN_MAN_GIRL_BOY,
        Emoji.FAMILY_MAN_MAN_BOY_BOY,
        Emoji.FAMILY_MAN_MAN_GIRL_GIRL,
        Emoji.FAMILY_WOMAN_WOMAN_BOY,
        Emoji.FAMILY_WOMAN_WOMAN_GIRL,
        Emoji.FAMILY_WOMAN_WOMAN_GIRL_BOY,
        Emoji.FAMILY_WOMAN_WOMAN_BOY_BOY,
        Emoji.FAMILY_WOMAN_WOMAN_GIRL_GIRL,
        Emoji.FAMILY_MAN_BOY,
        Emoji.FAMILY_MAN_BOY_BOY,
        Emoji.FAMILY_MAN_GIRL,
        Emoji.FAMILY_MAN_GIRL_BOY,
        Emoji.FAMILY_MAN_GIRL_GIRL,
        Emoji.FAMILY_WOMAN_BOY,
        Emoji.FAMILY_WOMAN_BOY_BOY,
        Emoji.FAMILY_WOMAN_GIRL,
        Emoji.FAMILY_WOMAN_GIRL_BOY,
        Emoji.FAMILY_WOMAN_GIRL_GIRL,
        Emoji.SPEAKING_HEAD,
        Emoji.BUST_IN_SILHOUETTE,
        Emoji.BUSTS_IN_SILHOUETTE,
        Emoji.PEOPLE_HUGGING,
        Emoji.FAMILY,
        Emoji.FAMILY_ADULT_ADULT_CHILD,
        Emoji.FAMILY_ADULT_ADULT_CHILD_CHILD,
        Emoji.FAMILY_ADULT_CHILD,
        Emoji.FAMILY_ADULT_CHILD_CHILD,
        Emoji.FOOTPRINTS,
    ),
    EmojiCategory.ANIMALS_AND_NATURE: (
        Emoji.MONKEY_FACE,
        Emoji.MONKEY,
        Emoji.GORILLA,
        Emoji.ORANGUTAN,
        Emoji.DOG_FACE,
        Emoji.DOG,
        Emoji.GUIDE_DOG,
        Emoji.SERVICE_DOG,
        Emoji.POODLE,
        Emoji.WOLF,
        Emoji.FOX,
        Emoji.RACCOON,
        Emoji.CAT_FACE,
        Emoji.CAT,
        Emoji.BLACK_CAT,
        Emoji.LION,
        Emoji.TIGER_FACE,
        Emoji.TIGER,
        Emoji.LEOPARD,
        Emoji.HORSE_FACE,
        Emoji.MOOSE,
        Emoji.DONKEY,
        Emoji.HORSE,
        Emoji.UNICORN,
        Emoji.ZEBRA,
        Emoji.DEER,
        Emoji.BISON,
        Emoji.COW_FACE,
        Emoji.OX,
        Emoji.WATER_BUFFALO,
        Emoji.COW,
        Emoji.PIG_FACE,
        Emoji.PIG,
        Emoji.BOAR,
        Emoji.PIG_NOSE,
        Emoji.RAM,
        Emoji.EWE,
        Emoji.GOAT,
        Emoji.CAMEL,
        Emoji.TWO_HUMP_CAMEL,
        Emoji.LLAMA,
        Emoji.GIRAFFE,
        Emoji.ELEPHANT,
        Emoji.MAMMOTH,
        Emoji.RHINOCEROS,
        Emoji.HIPPOPOTAMUS,
        Emoji.MOUSE_FACE,
        Emoji.MOUSE,
        Emoji.RAT,
        Emoji.HAMSTER,
        Emoji.RABBIT_FACE,
        Emoji.RABBIT,
        Emoji.CHIPMUNK,
        Emoji.BEAVER,
        Emoji.HEDGEHOG,
        Emoji.BAT,
        Emoji.BEAR,
        Emoji.POLAR_BEAR,
        Emoji.KOALA,
        Emoji.PANDA,
        Emoji.SLOTH,
        Emoji.OTTER,
        Emoji.SKUNK,
        Emoji.KANGAROO,
        Emoji.BADGER,
        Emoji.PAW_PRINTS,
        Emoji.TURKEY,
        Emoji.CHICKEN,
        Emoji.ROOSTER,
        Emoji.HATCHING_CHICK,
        Emoji.BABY_CHICK,
        Emoji.FRONT_FACING_BABY_CHICK,
        Emoji.BIRD,
        Emoji.PENGUIN,
        Emoji.DOVE,
        Emoji.EAGLE,
        Emoji.DUCK,
        Emoji.SWAN,
        Emoji.OWL,
        Emoji.DODO,
        Emoji.FEATHER,
        Emoji.FLAMINGO,
        Emoji.PEACOCK,
        Emoji.PARROT,
        Emoji.WING,
        Emoji.BLACK_BIRD,
        Emoji.GOOSE,
        Emoji.PHOENIX,
        Emoji.FROG,
        Emoji.CROCODILE,
        Emoji.TURTLE,
        Emoji.LIZARD,
        Emoji.SNAKE,
        Emoji.DRAGON_FACE,
        Emoji.DRAGON,
        Emoji.SAUROPOD,
        Emoji.T_REX,
        Emoji.SPOUTING_WHALE,
        Emoji.WHALE,
        Emoji.DOLPHIN,
        Emoji.SEAL,
        Emoji.FISH,
        Emoji.TROPICAL_FISH,
        Emoji.BLOWFISH,
        Emoji.SHARK,
        Emoji.OCTOPUS,
        Emoji.SPIRAL_SHELL,
        Emoji.CORAL,
        Emoji.JELLYFISH,
        Emoji.SNAIL,
        Emoji.BUTTERFLY,
        Emoji.BUG,
        Emoji.ANT,
        Emoji.HONEYBEE,
        Emoji.BEETLE,
        Emoji.LADY_BEETLE,
        Emoji.CRICKET,
        Emoji.COCKROACH,
        Emoji.SPIDER,
        Emoji.SPIDER_WEB,
        Emoji.SCORPION,
        Emoji.MOSQUITO,
        Emoji.FLY,
        Emoji.WORM,
        Emoji.MICROBE,
        Emoji.BOUQUET,
        Emoji.CHERRY_BLOSSOM,
        Emoji.WHITE_FLOWER,
        Emoji.LOTUS,
        Emoji.ROSETTE,
        Emoji.ROSE,
        Emoji.WILTED_FLOWER,
        Emoji.HIBISCUS,
        Emoji.SUNFLOWER,
        Emoji.BLOSSOM,
        Emoji.TULIP,
        Emoji.HYACINTH,
        Emoji.SEEDLING,
        Emoji.POTTED_PLANT,
        Emoji.EVERGREEN_TREE,
        Emoji.DECIDUOUS_TREE,
        Emoji.PALM_TREE,
        Emoji.CACTUS,
        Emoji.SHEAF_OF_RICE,
        Emoji.HERB,
        Emoji.SHAMROCK,
        Emoji.FOUR_LEAF_CLOVER,
        Emoji.MAPLE_LEAF,
        Emoji.FALLEN_LEAF,
        Emoji.LEAF_FLUTTERING_IN_WIND,
        Emoji.EMPTY_NEST,
        Emoji.NEST_WITH_EGGS,
        Emoji.MUSHROOM,
    ),
    EmojiCategory.FOOD_AND_DRINK: (
        Emoji.GRAPES,
        Emoji.MELON,
        Emoji.WATERMELON,
        Emoji.TANGERINE,
        Emoji.LEMON,
        Emoji.LIME,
        Emoji.BANANA,
        Emoji.PINEAPPLE,
        Emoji.MANGO,
        Emoji.RED_APPLE,
        Emoji.GREEN_APPLE,
        Emoji.PEAR,
        Emoji.PEACH,
        Emoji.CHERRIES,
        Emoji.STRAWBERRY,
        Emoji.BLUEBERRIES,
        Emoji.KIWI_FRUIT,
        Emoji.TOMATO,
        Emoji.OLIVE,
        Emoji.COCONUT,
        Emoji.AVOCADO,
        Emoji.EGGPLANT,
        Emoji.POTATO,
        Emoji.CARROT,
        Emoji.EAR_OF_CORN,
        Emoji.HOT_PEPPER,
        Emoji.BELL_PEPPER,
        Emoji.CUCUMBER,
        Emoji.LEAFY_GREEN,
        Emoji.BROCCOLI,
        Emoji.GARLIC,
        Emoji.ONION,
        Emoji.PEANUTS,
        Emoji.BEANS,
        Emoji.CHESTNUT,
        Emoji.GINGER_ROOT,
        Emoji.PEA_POD,
        Emoji.BROWN_MUSHROOM,
        Emoji.BREAD,
        Emoji.CROISSANT,
        Emoji.BAGUETTE_BREAD,
        Emoji.FLATBREAD,
        Emoji.PRETZEL,
        Emoji.BAGEL,
        Emoji.PANCAKES,
        Emoji.WAFFLE,
        Emoji.CHEESE_WEDGE,
        Emoji.MEAT_ON_BONE,
        Emoji.POULTRY_LEG,
        Emoji.CUT_OF_MEAT,
        Emoji.BACON,
        Emoji.HAMBURGER,
        Emoji.FRENCH_FRIES,
        Emoji.PIZZA,
        Emoji.HOT_DOG,
        Emoji.SANDWICH,
        Emoji.TACO,
        Emoji.BURRITO,
        Emoji.TAMALE,
        Emoji.STUFFED_FLATBREAD,
        Emoji.FALAFEL,
        Emoji.EGG,
        Emoji.COOKING,
        Emoji.SHALLOW_PAN_OF_FOOD,
        Emoji.POT_OF_FOOD,
        Emoji.FONDUE,
        Emoji.BOWL_WITH_SPOON,
        Emoji.GREEN_SALAD,
        Emoji.POPCORN,
        Emoji.BUTTER,
        Emoji.SALT,
        Emoji.CANNED_FOOD,
        Emoji.BENTO_BOX,
        Emoji.RICE_CRACKER,
        Emoji.RICE_BALL,
        Emoji.COOKED_RICE,
        Emoji.CURRY_RICE,
        Emoji.STEAMING_BOWL,
        Emoji.SPAGHETTI,
        Emoji.ROASTED_SWEET_POTATO,
        Emoji.ODEN,
        Emoji.SUSHI,
        Emoji.FRIED_SHRIMP,
        Emoji.FISH_CAKE_WITH_SWIRL,
        Emoji.MOON_CAKE,
        Emoji.DANGO,
        Emoji.DUMPLING,
        Emoji.FORTUNE_COOKIE,
        Emoji.TAKEOUT_BOX,
        Emoji.CRAB,
        Emoji.LOBSTER,
        Emoji.SHRIMP,
        Emoji.SQUID,
        Emoji.OYSTER,
        Emoji.SOFT_ICE_CREAM,
        Emoji.SHAVED_ICE,
        Emoji.ICE_CREAM,
        Emoji.DOUGHNUT,
        Emoji.COOKIE,
        Emoji.BIRTHDAY_CAKE,
        Emoji.SHORTCAKE,
        Emoji.CUPCAKE,
        Emoji.PIE,
        Emoji.CHOCOLATE_BAR,
        Emoji.CANDY,
        Emoji.LOLLIPOP,
        Emoji.CUSTARD,
        Emoji.HONEY_POT,
        Emoji.BABY_BOTTLE,
        Emoji.GLASS_OF_MILK,
        Emoji.HOT_BEVERAGE,
        Emoji.TEAPOT,
        Emoji.TEACUP_WITHOUT_HANDLE,
        Emoji.SAKE,
        Emoji.BOTTLE_WITH_POPPING_CORK,
        Emoji.WINE_GLASS,
        Emoji.COCKTAIL_GLASS,
        Emoji.TROPICAL_DRINK,
        Emoji.BEER_MUG,
        Emoji.CLINKING_BEER_MUGS,
        Emoji.CLINKING_GLASSES,
        Emoji.TUMBLER_GLASS,
        Emoji.POURING_LIQUID,
        Emoji.CUP_WITH_STRAW,
        Emoji.BUBBLE_TEA,
        Emoji.BEVERAGE_BOX,
        Emoji.MATE,
        Emoji.ICE,
        Emoji.CHOPSTICKS,
        Emoji.FORK_AND_KNIFE_WITH_PLATE,
        Emoji.FORK_AND_KNIFE,
        Emoji.SPOON,
        Emoji.KITCHEN_KNIFE,
        Emoji.JAR,
        Emoji.AMPHORA,
    ),
    EmojiCategory.TRAVEL_AND_PLACES: (
        Emoji.GLOBE_SHOWING_EUROPE_AFRICA,
        Emoji.GLOBE_SHOWING_AMERICAS,
        Emoji.GLOBE_SHOWING_ASIA_AUSTRALIA,
        Emoji.GLOBE_WITH_MERIDIANS,
        Emoji.WORLD_MAP,
        Emoji.MAP_OF_JAPAN,
        Emoji.COMPASS,
        Emoji.SNOW_CAPPED_MOUNTAIN,
        Emoji.MOUNTAIN,
        Emoji.VOLCANO,
        Emoji.MOUNT_FUJI,
        Emoji.CAMPING,
        Emoji.BEACH_WITH_UMBRELLA,
        Emoji.DESERT,
        Emoji.DESERT_ISLAND,
        Emoji.NATIONAL_PARK,
        Emoji.STADIUM,
        Emoji.CLASSICAL_BUILDING,
        Emoji.BUILDING_CONSTRUCTION,
        Emoji.BRICK,
        Emoji.ROCK,
        Emoji.WOOD,
        Emoji.HUT,
        Emoji.HOUSES,
        Emoji.DERELICT_HOUSE,
        Emoji.HOUSE,
        Emoji.HOUSE_WITH_GARDEN,
        Emoji.OFFICE_BUILDING,
        Emoji.JAPANESE_POST_OFFICE,
        Emoji.POST_OFFICE,
        Emoji.HOSPITAL,
        Emoji.BANK,
        Emoji.HOTEL,
        Emoji.LOVE_HOTEL,
        Emoji.CONVENIENCE_STORE,
        Emoji.SCHOOL,
        Emoji.DEPARTMENT_STORE,
        Emoji.FACTORY,
        Emoji.JAPANESE_CASTLE,
        Emoji.CASTLE,
        Emoji.WEDDING,
        Emoji.TOKYO_TOWER,
        Emoji.STATUE_OF_LIBERTY,
        Emoji.CHURCH,
        Emoji.MOSQUE,
        Emoji.HINDU_TEMPLE,
        Emoji.SYNAGOGUE,
        Emoji.SHINTO_SHRINE,
        Emoji.KAABA,
        Emoji.FOUNTAIN,
        Emoji.TENT,
        Emoji.FOGGY,
        Emoji.NIGHT_WITH_STARS,
        Emoji.CITYSCAPE,
        Emoji.SUNRISE_OVER_MOUNTAINS,
        Emoji.SUNRISE,
        Emoji.CITYSCAPE_AT_DUSK,
        Emoji.SUNSET,
        Emoji.BRIDGE_AT_NIGHT,
        Emoji.HOT_SPRINGS,
        Emoji.CAROUSEL_HORSE,
        Emoji.PLAYGROUND_SLIDE,
        Emoji.FERRIS_WHEEL,
        Emoji.ROLLER_COASTER,
        Emoji.BARBER_POLE,
        Emoji.CIRCUS_TENT,
        Emoji.LOCOMOTIVE,
        Emoji.RAILWAY_CAR,
        Emoji.HIGH_SPEED_TRAIN,
        Emoji.BULLET_TRAIN,
        Emoji.TRAIN,
        Emoji.METRO,
        Emoji.LIGHT_RAIL,
        Emoji.STATION,
        Emoji.TRAM,
        Emoji.MONORAIL,
        Emoji.MOUNTAIN_RAILWAY,
        Emoji.TRAM_CAR,
        Emoji.BUS,
        Emoji.ONCOMING_BUS,
        Emoji.TROLLEYBUS,
        Emoji.MINIBUS,
        Emoji.AMBULANCE,
        Emoji.FIRE_ENGINE,
        Emoji.POLICE_CAR,
        Emoji.ONCOMING_POLICE_CAR,
        Emoji.TAXI,
        Emoji.ONCOMING_TAXI,
        Emoji.AUTOMOBILE,
        Emoji.ONCOMING_AUTOMOBILE,
        Emoji.SPORT_UTILITY_VEHICLE,
        Emoji.PICKUP_TRUCK,
        Emoji.DELIVERY_TRUCK,
        Emoji.ARTICULATED_LORRY,
        Emoji.TRACTOR,
        Emoji.RACING_CAR,
        Emoji.MOTORCYCLE,
        Emoji.MOTOR_SCOOTER,
        Emoji.MANUAL_WHEELCHAIR,
        Emoji.MOTORIZED_WHEELCHAIR,
        Emoji.AUTO_RICKSHAW,
        Emoji.BICYCLE,
        Emoji.KICK_SCOOTER,
        Emoji.SKATEBOARD,
        Emoji.ROLLER_SKATE,
        Emoji.BUS_STOP,
        Emoji.MOTORWAY,
        Emoji.RAILWAY_TRACK,
        Emoji.OIL_DRUM,
        Emoji.FUEL_PUMP,
        Emoji.WHEEL,
        Emoji.POLICE_CAR_LIGHT,
        Emoji.HORIZONTAL_TRAFFIC_LIGHT,
        Emoji.VERTICAL_TRAFFIC_LIGHT,
        Emoji.STOP_SIGN,
        Emoji.CONSTRUCTION,
        Emoji.ANCHOR,
        Emoji.RING_BUOY,
        Emoji.SAILBOAT,
        Emoji.CANOE,
        Emoji.SPEEDBOAT,
        Emoji.PASSENGER_SHIP,
        Emoji.FERRY,
        Emoji.MOTOR_BOAT,
        Emoji.SHIP,
        Emoji.AIRPLANE,
        Emoji.SMALL_AIRPLANE,
        Emoji.AIRPLANE_DEPARTURE,
        Emoji.AIRPLANE_ARRIVAL,
        Emoji.PARACHUTE,
        Emoji.SEAT,
        Emoji.HELICOPTER,
        Emoji.SUSPENSION_RAILWAY,
        Emoji.MOUNTAIN_CABLEWAY,
        Emoji.AERIAL_TRAMWAY,
        Emoji.SATELLITE,
        Emoji.ROCKET,
        Emoji.FLYING_SAUCER,
        Emoji.BELLHOP_BELL,
        Emoji.LUGGAGE,
        Emoji.HOURGLASS_DONE,
        Emoji.HOURGLASS_NOT_DONE,
        Emoji.WATCH,
        Emoji.ALARM_CLOCK,
        Emoji.STOPWATCH,
        Emoji.TIMER_CLOCK,
        Emoji.MANTELPIECE_CLOCK,
        Emoji.TWELVE_OCLOCK,
        Emoji.TWELVE_THIRTY,
        Emoji.ONE_OCLOCK,
        Emoji.ONE_THIRTY,
        Emoji.TWO_OCLOCK,
        Emoji.TWO_THIRTY,
        Emoji.THREE_OCLOCK,
        Emoji.THREE_THIRTY,
        Emoji.FOUR_OCLOCK,
        Emoji.FOUR_THIRTY,
        Emoji.FIVE_OCLOCK,
        Emoji.FIVE_THIRTY,
        Emoji.SIX_OCLOCK,
        Emoji.SIX_THIRTY,
        Emoji.SEVEN_OCLOCK,
        Emoji.SEVEN_THIRTY,
        Emoji.EIGHT_OCLOCK,
        Emoji.EIGHT_THIRTY,
        Emoji.NINE_OCLOCK,
        Emoji.NINE_THIRTY,
        Emoji.TEN_OCLOCK,
        Emoji.TEN_THIRTY,
        Emoji.ELEVEN_OCLOCK,
        Emoji.ELEVEN_THIRTY,
        Emoji.NEW_MOON,
        Emoji.WAXING_CRESCENT_MOON,
        Emoji.FIRST_QUARTER_MOON,
        Emoji.WAXING_GIBBOUS_MOON,
        Emoji.FULL_MOON,
        Emoji.WANING_GIBBOUS_MOON,
        Emoji.LAST_QUARTER_MOON,
        Emoji.WANING_CRESCENT_MOON,
        Emoji.CRESCENT_MOON,
        Emoji.NEW_MOON_FACE,
        Emoji.FIRST_QUARTER_MOON_FACE,
        Emoji.LAST_QUARTER_MOON_FACE,
        Emoji.THERMOMETER,
        Emoji.SUN,
        Emoji.FULL_MOON_FACE,
        Emoji.SUN_WITH_FACE,
        Emoji.RINGED_PLANET,
        Emoji.STAR,
        Emoji.GLOWING_STAR,
        Emoji.SHOOTING_STAR,
        Emoji.MILKY_WAY,
        Emoji.CLOUD,
        Emoji.SUN_BEHIND_CLOUD,
        Emoji.CLOUD_WITH_LIGHTNING_AND_RAIN,
        Emoji.SUN_BEHIND_SMALL_CLOUD,
        Emoji.SUN_BEHIND_LARGE_CLOUD,
        Emoji.SUN_BEHIND_RAIN_CLOUD,
        Emoji.CLOUD_WITH_RAIN,
        Emoji.CLOUD_WITH_SNOW,
        Emoji.CLOUD_WITH_LIGHTNING,
        Emoji.TORNADO,
        Emoji.FOG,
        Emoji.WIND_FACE,
        Emoji.CYCLONE,
        Emoji.RAINBOW,
        Emoji.CLOSED_UMBRELLA,
        Emoji.UMBRELLA,
        Emoji.UMBRELLA_WITH_RAIN_DROPS,
        Emoji.UMBRELLA_ON_GROUND,
        Emoji.HIGH_VOLTAGE,
        Emoji.SNOWFLAKE,
        Emoji.SNOWMAN,
        Emoji.SNOWMAN_WITHOUT_SNOW,
        Emoji.COMET,
        Emoji.FIRE,
        Emoji.DROPLET,
        Emoji.WATER_WAVE,
    ),
    EmojiCategory.ACTIVITIES: (
        Emoji.JACK_O_LANTERN,
        Emoji.CHRISTMAS_TREE,
        Emoji.FIREWORKS,
        Emoji.SPARKLER,
        Emoji.FIRECRACKER,
        Emoji.SPARKLES,
        Emoji.BALLOON,
        Emoji.PARTY_POPPER,
        Emoji.CONFETTI_BALL,
        Emoji.TANABATA_TREE,
        Emoji.PINE_DECORATION,
        Emoji.JAPANESE_DOLLS,
        Emoji.CARP_STREAMER,
        Emoji.WIND_CHIME,
        Emoji.MOON_VIEWING_CEREMONY,
        Emoji.RED_ENVELOPE,
        Emoji.RIBBON,
        Emoji.WRAPPED_GIFT,
        Emoji.REMINDER_RIBBON,
        Emoji.ADMISSION_TICKETS,
        Emoji.TICKET,
        Emoji.MILITARY_MEDAL,
        Emoji.TROPHY,
        Emoji.SPORTS_MEDAL,
        Emoji.FIRST_PLACE_MEDAL,
        Emoji.SECOND_PLACE_MEDAL,
        Emoji.THIRD_PLACE_MEDAL,
        Emoji.SOCCER_BALL,
        Emoji.BASEBALL,
        Emoji.SOFTBALL,
        Emoji.BASKETBALL,
        Emoji.VOLLEYBALL,
        Emoji.AMERICAN_FOOTBALL,
        Emoji.RUGBY_FOOTBALL,
        Emoji.TENNIS,
        Emoji.FLYING_DISC,
        Emoji.BOWLING,
        Emoji.CRICKET_GAME,
        Emoji.FIELD_HOCKEY,
        Emoji.ICE_HOCKEY,
        Emoji.LACROSSE,
        Emoji.PING_PONG,
        Emoji.BADMINTON,
        Emoji.BOXING_GLOVE,
        Emoji.MARTIAL_ARTS_UNIFORM,
        Emoji.GOAL_NET,
        Emoji.FLAG_IN_HOLE,
        Emoji.ICE_SKATE,
        Emoji.FISHING_POLE,
        Emoji.DIVING_MASK,
        Emoji.RUNNING_SHIRT,
        Emoji.SKIS,
        Emoji.SLED,
        Emoji.CURLING_STONE,
        Emoji.BULLSEYE,
        Emoji.YO_YO,
        Emoji.KITE,
        Emoji.WATER_PISTOL,
        Emoji.POOL_8_BALL,
        Emoji.CRYSTAL_BALL,
        Emoji.MAGIC_WAND,
        Emoji.VIDEO_GAME,
        Emoji.JOYSTICK,
        Emoji.SLOT_MACHINE,
        Emoji.GAME_DIE,
        Emoji.PUZZLE_PIECE,
        Emoji.TEDDY_BEAR,
        Emoji.PINATA,
        Emoji.MIRROR_BALL,
        Emoji.NESTING_DOLLS,
        Emoji.SPADE_SUIT,
        Emoji.HEART_SUIT,
        Emoji.DIAMOND_SUIT,
        Emoji.CLUB_SUIT,
        Emoji.CHESS_PAWN,
        Emoji.JOKER,
        Emoji.MAHJONG_RED_DRAGON,
        Emoji.FLOWER_PLAYING_CARDS,
        Emoji.PERFORMING_ARTS,
        Emoji.FRAMED_PICTURE,
        Emoji.ARTIST_PALETTE,
        Emoji.THREAD,
        Emoji.SEWING_NEEDLE,
        Emoji.YARN,
        Emoji.KNOT,
    ),
    EmojiCategory.OBJECTS: (
        Emoji.GLASSES,
        Emoji.SUNGLASSES,
        Emoji.GOGGLES,
        Emoji.LAB_COAT,
        Emoji.SAFETY_VEST,
        Emoji.NECKTIE,
        Emoji.T_SHIRT,
        Emoji.JEANS,
        Emoji.SCARF,
        Emoji.GLOVES,
        Emoji.COAT,
        Emoji.SOCKS,
        Emoji.DRESS,
        Emoji.KIMONO,
        Emoji.SARI,
        Emoji.ONE_PIECE_SWIMSUIT,
        Emoji.BRIEFS,
        Emoji.SHORTS,
        Emoji.BIKINI,
        Emoji.WOMANS_CLOTHES,
        Emoji.FOLDING_HAND_FAN,
        Emoji.PURSE,
        Emoji.HANDBAG,
        Emoji.CLUTCH_BAG,
        Emoji.SHOPPING_BAGS,
        Emoji.BACKPACK,
        Emoji.THONG_SANDAL,
        Emoji.MANS_SHOE,
        Emoji.RUNNING_SHOE,
        Emoji.HIKING_BOOT,
        Emoji.FLAT_SHOE,
        Emoji.HIGH_HEELED_SHOE,
        Emoji.WOMANS_SANDAL,
        Emoji.BALLET_SHOES,
        Emoji.WOMANS_BOOT,
        Emoji.HAIR_PICK,
        Emoji.CROWN,
        Emoji.WOMANS_HAT,
        Emoji.TOP_HAT,
        Emoji.GRADUATION_CAP,
        Emoji.BILLED_CAP,
        Emoji.MILITARY_HELMET,
        Emoji.RESCUE_WORKERS_HELMET,
        Emoji.PRAYER_BEADS,
        Emoji.LIPSTICK,
        Emoji.RING,
        Emoji.GEM_STONE,
        Emoji.MUTED_SPEAKER,
        Emoji.SPEAKER_LOW_VOLUME,
        Emoji.SPEAKER_MEDIUM_VOLUME,
        Emoji.SPEAKER_HIGH_VOLUME,
        Emoji.LOUDSPEAKER,
        Emoji.MEGAPHONE,
        Emoji.POSTAL_HORN,
        Emoji.BELL,
        Emoji.BELL_WITH_SLASH,
        Emoji.MUSICAL_SCORE,
        Emoji.MUSICAL_NOTE,
        Emoji.MUSICAL_NOTES,
        Emoji.STUDIO_MICROPHONE,
        Emoji.LEVEL_SLIDER,
        Emoji.CONTROL_KNOBS,
        Emoji.MICROPHONE,
        Emoji.HEADPHONE,
        Emoji.RADIO,
        Emoji.SAXOPHONE,
        Emoji.ACCORDION,
        Emoji.GUITAR,
        Emoji.MUSICAL_KEYBOARD,
        Emoji.TRUMPET,
        Emoji.VIOLIN,
        Emoji.BANJO,
        Emoji.DRUM,
        Emoji.LONG_DRUM,
        Emoji.MARACAS,
        Emoji.FLUTE,
        Emoji.MOBILE_PHONE,
        Emoji.MOBILE_PHONE_WITH_ARROW,
        Emoji.TELEPHONE,
        Emoji.TELEPHONE_RECEIVER,
        Emoji.PAGER,
        Emoji.FAX_MACHINE,
        Emoji.BATTERY,
        Emoji.LOW_BATTERY,
        Emoji.ELECTRIC_PLUG,
        Emoji.LAPTOP,
        Emoji.DESKTOP_COMPUTER,
        Emoji.PRINTER,
        Emoji.KEYBOARD,
        Emoji.COMPUTER_MOUSE,
        Emoji.TRACKBALL,
        Emoji.COMPUTER_DISK,
        Emoji.FLOPPY_DISK,
        Emoji.OPTICAL_DISK,
        Emoji.DVD,
        Emoji.ABACUS,
        Emoji.MOVIE_CAMERA,
        Emoji.FILM_FRAMES,
        Emoji.FILM_PROJECTOR,
        Emoji.CLAPPER_BOARD,
        Emoji.TELEVISION,
        Emoji.CAMERA,
        Emoji.CAMERA_WITH_FLASH,
        Emoji.VIDEO_CAMERA,
        Emoji.VIDEOCASSETTE,
        Emoji.MAGNIFYING_GLASS_TILTED_LEFT,
        Emoji.MAGNIFYING_GLASS_TILTED_RIGHT,
        Emoji.CANDLE,
        Emoji.LIGHT_BULB,
        Emoji.FLASHLIGHT,
        Emoji.RED_PAPER_LANTERN,
        Emoji.DIYA_LAMP,
        Emoji.NOTEBOOK_WITH_DECORATIVE_COVER,
        Emoji.CLOSED_BOOK,
        Emoji.OPEN_BOOK,
        Emoji.GREEN_BOOK,
        Emoji.BLUE_BOOK,
        Emoji.ORANGE_BOOK,
        Emoji.BOOKS,
        Emoji.NOTEBOOK,
        Emoji.LEDGER,
        Emoji.PAGE_WITH_CURL,
        Emoji.SCROLL,
        Emoji.PAGE_FACING_UP,
        Emoji.NEWSPAPER,
        Emoji.ROLLED_UP_NEWSPAPER,
        Emoji.BOOKMARK_TABS,
        Emoji.BOOKMARK,
        Emoji.LABEL,
        Emoji.MONEY_BAG,
        Emoji.COIN,
        Emoji.YEN_BANKNOTE,
        Emoji.DOLLAR_BANKNOTE,
        Emoji.EURO_BANKNOTE,
        Emoji.POUND_BANKNOTE,
        Emoji.MONEY_WITH_WINGS,
        Emoji.CREDIT_CARD,
        Emoji.RECEIPT,
        Emoji.CHART_INCREASING_WITH_YEN,
        Emoji.ENVELOPE,
        Emoji.E_MAIL,
        Emoji.INCOMING_ENVELOPE,
        Emoji.ENVELOPE_WITH_ARROW,
        Emoji.OUTBOX_TRAY,
        Emoji.INBOX_TRAY,
        Emoji.PACKAGE,
        Emoji.CLOSED_MAILBOX_WITH_RAISED_FLAG,
        Emoji.CLOSED_MAILBOX_WITH_LOWERED_FLAG,
        Emoji.OPEN_MAILBOX_WITH_RAISED_FLAG,
        Emoji.OPEN_MAILBOX_WITH_LOWERED_FLAG,
        Emoji.POSTBOX,
        Emoji.BALLOT_BOX_WITH_BALLOT,
        Emoji.PENCIL,
        Emoji.BLACK_NIB,
        Emoji.FOUNTAIN_PEN,
        Emoji.PEN,
        Emoji.PAINTBRUSH,
        Emoji.CRAYON,
        Emoji.MEMO,
        Emoji.BRIEFCASE,
        Emoji.FILE_FOLDER,
        Emoji.OPEN_FILE_FOLDER,
        Emoji.CARD_INDEX_DIVIDERS,
        Emoji.CALENDAR,
        Emoji.TEAR_OFF_CALENDAR,
        Emoji.SPIRAL_NOTEPAD,
        Emoji.SPIRAL_CALENDAR,
        Emoji.CARD_INDEX,
        Emoji.CHART_INCREASING,
        Emoji.CHART_DECREASING,
        Emoji.BAR_CHART,
        Emoji.CLIPBOARD,
        Emoji.PUSHPIN,
        Emoji.ROUND_PUSHPIN,
        Emoji.PAPERCLIP,
        Emoji.LINKED_PAPERCLIPS,
        Emoji.STRAIGHT_RULER,
        Emoji.TRIANGULAR_RULER,
        Emoji.SCISSORS,
        Emoji.CARD_FILE_BOX,
        Emoji.FILE_CABINET,
        Emoji.WASTEBASKET,
        Emoji.LOCKED,
        Emoji.UNLOCKED,
        Emoji.LOCKED_WITH_PEN,
        Emoji.LOCKED_WITH_KEY,
        Emoji.KEY,
        Emoji.OLD_KEY,
        Emoji.HAMMER,
        Emoji.AXE,
        Emoji.PICK,
        Emoji.HAMMER_AND_PICK,
        Emoji.HAMMER_AND_WRENCH,
        Emoji.DAGGER,
        Emoji.CROSSED_SWORDS,
        Emoji.BOMB,
        Emoji.BOOMERANG,
        Emoji.BOW_AND_ARROW,
        Emoji.SHIELD,
        Emoji.CARPENTRY_SAW,
        Emoji.WRENCH,
        Emoji.SCREWDRIVER,
        Emoji.NUT_AND_BOLT,
        Emoji.GEAR,
        Emoji.CLAMP,
        Emoji.BALANCE_SCALE,
        Emoji.WHITE_CANE,
        Emoji.LINK,
        Emoji.BROKEN_CHAIN,
        Emoji.CHAINS,
        Emoji.HOOK,
        Emoji.TOOLBOX,
        Emoji.MAGNET,
        Emoji.LADDER,
        Emoji.ALEMBIC,
        Emoji.TEST_TUBE,
        Emoji.PETRI_DISH,
        Emoji.DNA,
        Emoji.MICROSCOPE,
        Emoji.TELESCOPE,
        Emoji.SATELLITE_ANTENNA,
        Emoji.SYRINGE,
        Emoji.DROP_OF_BLOOD,
        Emoji.PILL,
        Emoji.ADHESIVE_BANDAGE,
        Emoji.CRUTCH,
        Emoji.STETHOSCOPE,
        Emoji.X_RAY,
        Emoji.DOOR,
        Emoji.ELEVATOR,
        Emoji.MIRROR,
        Emoji.WINDOW,
        Emoji.BED,
        Emoji.COUCH_AND_LAMP,
        Emoji.CHAIR,
        Emoji.TOILET,
        Emoji.PLUNGER,
        Emoji.SHOWER,
        Emoji.BATHTUB,
        Emoji.MOUSE_TRAP,
        Emoji.RAZOR,
        Emoji.LOTION_BOTTLE,
        Emoji.SAFETY_PIN,
        Emoji.BROOM,
        Emoji.BASKET,
        Emoji.ROLL_OF_PAPER,
        Emoji.BUCKET,
        Emoji.SOAP,
        Emoji.BUBBLES,
        Emoji.TOOTHBRUSH,
        Emoji.SPONGE,
        Emoji.FIRE_EXTINGUISHER,
        Emoji.SHOPPING_CART,
        Emoji.CIGARETTE,
        Emoji.COFFIN,
        Emoji.HEADSTONE,
        Emoji.FUNERAL_URN,
        Emoji.NAZAR_AMULET,
        Emoji.HAMSA,
        Emoji.MOAI,
        Emoji.PLACARD,
        Emoji.IDENTIFICATION_CARD,
    ),
    EmojiCategory.SYMBOLS: (
        Emoji.ATM_SIGN,
        Emoji.LITTER_IN_BIN_SIGN,
        Emoji.POTABLE_WATER,
        Emoji.WHEELCHAIR_SYMBOL,
        Emoji.MENS_ROOM,
        Emoji.WOMENS_ROOM,
        Emoji.RESTROOM,
        Emoji.BABY_SYMBOL,
        Emoji.WATER_CLOSET,
        Emoji.PASSPORT_CONTROL,
        Emoji.CUSTOMS,
        Emoji.BAGGAGE_CLAIM,
        Emoji.LEFT_LUGGAGE,
        Emoji.WARNING,
        Emoji.CHILDREN_CROSSING,
        Emoji.NO_ENTRY,
        Emoji.PROHIBITED,
        Emoji.NO_BICYCLES,
        Emoji.NO_SMOKING,
        Emoji.NO_LITTERING,
        Emoji.NON_POTABLE_WATER,
        Emoji.NO_PEDESTRIANS,
        Emoji.NO_MOBILE_PHONES,
        Emoji.NO_ONE_UNDER_EIGHTEEN,
        Emoji.RADIOACTIVE,
        Emoji.BIOHAZARD,
        Emoji.UP_ARROW,
        Emoji.UP_RIGHT_ARROW,
        Emoji.RIGHT_ARROW,
        Emoji.DOWN_RIGHT_ARROW,
        Emoji.DOWN_ARROW,
        Emoji.DOWN_LEFT_ARROW,
        Emoji.LEFT_ARROW,
        Emoji.UP_LEFT_ARROW,
        Emoji.UP_DOWN_ARROW,
        Emoji.LEFT_RIGHT_ARROW,
        Emoji.RIGHT_ARROW_CURVING_LEFT,
        Emoji.LEFT_ARROW_CURVING_RIGHT,
        Emoji.RIGHT_ARROW_CURVING_UP,
        Emoji.RIGHT_ARROW_CURVING_DOWN,
        Emoji.CLOCKWISE_VERTICAL_ARROWS,
        Emoji.COUNTERCLOCKWISE_ARROWS_BUTTON,
        Emoji.BACK_ARROW,
        Emoji.END_ARROW,
        Emoji.ON_ARROW,
        Emoji.SOON_ARROW,
        Emoji.TOP_ARROW,
        Emoji.PLACE_OF_WORSHIP,
        Emoji.ATOM_SYMBOL,
        Emoji.OM,
        Emoji.STAR_OF_DAVID,
        Emoji.WHEEL_OF_DHARMA,
        Emoji.YIN_YANG,
        Emoji.LATIN_CROSS,
        Emoji.ORTHODOX_CROSS,
        Emoji.STAR_AND_CRESCENT,
        Emoji.PEACE_SYMBOL,
        Emoji.MENORAH,
        Emoji.DOTTED_SIX_POINTED_STAR,
        Emoji.KHANDA,
        Emoji.ARIES,
        Emoji.TAURUS,
        Emoji.GEMINI,
        Emoji.CANCER,
        Emoji.LEO,
        Emoji.VIRGO,
        Emoji.LIBRA,
        Emoji.SCORPIO,
        Emoji.SAGITTARIUS,
        Emoji.CAPRICORN,
        Emoji.AQUARIUS,
        Emoji.PISCES,
        Emoji.OPHIUCHUS,
        Emoji.SHUFFLE_TRACKS_BUTTON,
        Emoji.REPEAT_BUTTON,
        Emoji.REPEAT_SINGLE_BUTTON,
        Emoji.PLAY_BUTTON,
        Emoji.FAST_FORWARD_BUTTON,
        Emoji.NEXT_TRACK_BUTTON,
        Emoji.PLAY_OR_PAUSE_BUTTON,
        Emoji.REVERSE_BUTTON,
        Emoji.FAST_REVERSE_BUTTON,
        Emoji.LAST_TRACK_BUTTON,
        Emoji.UPWARDS_BUTTON,
        Emoji.FAST_UP_BUTTON,
        Emoji.DOWNWARDS_BUTTON,
        Emoji.FAST_DOWN_BUTTON,
        Emoji.PAUSE_BUTTON,
        Emoji.STOP_BUTTON,
        Emoji.RECORD_BUTTON,
        Emoji.EJECT_BUTTON,
        Emoji.CINEMA,
        Emoji.DIM_BUTTON,
        Emoji.BRIGHT_BUTTON,
        Emoji.ANTENNA_BARS,
        Emoji.WIRELESS,
        Emoji.VIBRATION_MODE,
        Emoji.MOBILE_PHONE_OFF,
        Emoji.FEMALE_SIGN,
        Emoji.MALE_SIGN,
        Emoji.TRANSGENDER_SYMBOL,
        Emoji.MULTIPLY,
        Emoji.PLUS,
        Emoji.MINUS,
        Emoji.DIVIDE,
        Emoji.HEAVY_EQUALS_SIGN,
        Emoji.INFINITY,
        Emoji.DOUBLE_EXCLAMATION_MARK,
        Emoji.EXCLAMATION_QUESTION_MARK,
        Emoji.RED_QUESTION_MARK,
        Emoji.WHITE_QUESTION_MARK,
        Emoji.WHITE_EXCLAMATION_MARK,
        Emoji.RED_EXCLAMATION_MARK,
        Emoji.WAVY_DASH,
        Emoji.CURRENCY_EXCHANGE,
        Emoji.HEAVY_DOLLAR_SIGN,
        Emoji.MEDICAL_SYMBOL,
        Emoji.RECYCLING_SYMBOL,
        Emoji.FLEUR_DE_LIS,
        Emoji.TRIDENT_EMBLEM,
        Emoji.NAME_BADGE,
        Emoji.JAPANESE_SYMBOL_FOR_BEGINNER,
        Emoji.HOLLOW_RED_CIRCLE,
        Emoji.CHECK_MARK_BUTTON,
        Emoji.CHECK_BOX_WITH_CHECK,
        Emoji.CHECK_MARK,
        Emoji.CROSS_MARK,
        Emoji.CROSS_MARK_BUTTON,
        Emoji.CURLY_LOOP,
        Emoji.DOUBLE_CURLY_LOOP,
        Emoji.PART_ALTERNATION_MARK,
        Emoji.EIGHT_SPOKED_ASTERISK,
        Emoji.EIGHT_POINTED_STAR,
        Emoji.SPARKLE,
        Emoji.COPYRIGHT,
        Emoji.REGISTERED,
        Emoji.TRADE_MARK,
        Emoji.KEYCAP_NUMBER_SIGN,
        Emoji.KEYCAP_ASTERISK,
        Emoji.KEYCAP_0,
        Emoji.KEYCAP_1,
        Emoji.KEYCAP_2,
        Emoji.KEYCAP_3,
        Emoji.KEYCAP_4,
        Emoji.KEYCAP_5,
        Emoji.KEYCAP_6,
        Emoji.KEYCAP_7,
        Emoji.KEYCAP_8,
        Emoji.KEYCAP_9,
        Emoji.KEYCAP_10,
        Emoji.INPUT_LATIN_UPPERCASE,
        Emoji.INPUT_LATIN_LOWERCASE,
        Emoji.INPUT_NUMBERS,
        Emoji.INPUT_SYMBOLS,
        Emoji.INPUT_LATIN_LETTERS,
        Emoji.A_BUTTON_BLOOD_TYPE,
        Emoji.AB_BUTTON_BLOOD_TYPE,
        Emoji.B_BUTTON_BLOOD_TYPE,
        Emoji.CL_BUTTON,
        Emoji.COOL_BUTTON,
        Emoji.FREE_BUTTON,
        Emoji.INFORMATION,
        Emoji.ID_BUTTON,
        Emoji.CIRCLED_M,
        Emoji.NEW_BUTTON,
        Emoji.NG_BUTTON,
        Emoji.O_BUTTON_BLOOD_TYPE,
        Emoji.OK_BUTTON,
        Emoji.P_BUTTON,
        Emoji.SOS_BUTTON,
        Emoji.UP_BUTTON,
        Emoji.VS_BUTTON,
        Emoji.JAPANESE_HERE_BUTTON,
        Emoji.JAPANESE_SERVICE_CHARGE_BUTTON,
        Emoji.JAPANESE_MONTHLY_AMOUNT_BUTTON,
        Emoji.JAPANESE_NOT_FREE_OF_CHARGE_BUTTON,
        Emoji.JAPANESE_RESERVED_BUTTON,
        Emoji.JAPANESE_BARGAIN_BUTTON,
        Emoji.JAPANESE_DISCOUNT_BUTTON,
        Emoji.JAPANESE_FREE_OF_CHARGE_BUTTON,
        Emoji.JAPANESE_PROHIBITED_BUTTON,
        Emoji.JAPANESE_ACCEPTABLE_BUTTON,
        Emoji.JAPANESE_APPLICATION_BUTTON,
        Emoji.JAPANESE_PASSING_GRADE_BUTTON,
        Emoji.JAPANESE_VACANCY_BUTTON,
        Emoji.JAPANESE_CONGRATULATIONS_BUTTON,
        Emoji.JAPANESE_SECRET_BUTTON,
        Emoji.JAPANESE_OPEN_FOR_BUSINESS_BUTTON,
        Emoji.JAPANESE_NO_VACANCY_BUTTON,
        Emoji.RED_CIRCLE,
        Emoji.ORANGE_CIRCLE,
        Emoji.YELLOW_CIRCLE,
        Emoji.GREEN_CIRCLE,
        Emoji.BLUE_CIRCLE,
        Emoji.PURPLE_CIRCLE,
        Emoji.BROWN_CIRCLE,
        Emoji.BLACK_CIRCLE,
        Emoji.WHITE_CIRCLE,
        Emoji.RED_SQUARE,
        Emoji.ORANGE_SQUARE,
        Emoji.YELLOW_SQUARE,
        Emoji.GREEN_SQUARE,
        Emoji.BLUE_SQUARE,
        Emoji.PURPLE_SQUARE,
        Emoji.BROWN_SQUARE,
        Emoji.BLACK_LARGE_SQUARE,
        Emoji.WHITE_LARGE_SQUARE,
        Emoji.BLACK_MEDIUM_SQUARE,
        Emoji.WHITE_MEDIUM_SQUARE,
        Emoji.BLACK_MEDIUM_SMALL_SQUARE,
        Emoji.WHITE_MEDIUM_SMALL_SQUARE,
        Emoji.BLACK_SMALL_SQUARE,
        Emoji.WHITE_SMALL_SQUARE,
        Emoji.LARGE_ORANGE_DIAMOND,
        Emoji.LARGE_BLUE_DIAMOND,
        Emoji.SMALL_ORANGE_DIAMOND,
        Emoji.SMALL_BLUE_DIAMOND,
        Emoji.RED_TRIANGLE_POINTED_UP,
        Emoji.RED_TRIANGLE_POINTED_DOWN,
        Emoji.DIAMOND_WITH_A_DOT,
        Emoji.RADIO_BUTTON,
        Emoji.WHITE_SQUARE_BUTTON,
        Emoji.BLACK_SQUARE_BUTTON,
    ),
    EmojiCategory.FLAGS: (
        Emoji.CHEQUERED_FLAG,
        Emoji.TRIANGULAR_FLAG,
        Emoji.CROSSED_FLAGS,
        Emoji.BLACK_FLAG,
        Emoji.WHITE_FLAG,
        Emoji.RAINBOW_FLAG,
        Emoji.TRANSGENDER_FLAG,
        Emoji.PIRATE_FLAG,
        Emoji.FLAG_ASCENSION_ISLAND,
        Emoji.FLAG_ANDORRA,
        Emoji.FLAG_UNITED_ARAB_EMIRATES,
        Emoji.FLAG_AFGHANISTAN,
        Emoji.FLAG_ANTIGUA_AND_BARBUDA,
        Emoji.FLAG_ANGUILLA,
        Emoji.FLAG_ALBANIA,
        Emoji.FLAG_ARMENIA,
        Emoji.FLAG_ANGOLA,
        Emoji.FLAG_ANTARCTICA,
        Emoji.FLAG_ARGENTINA,
        Emoji.FLAG_AMERICAN_SAMOA,
        Emoji.FLAG_AUSTRIA,
        Emoji.FLAG_AUSTRALIA,
        Emoji.FLAG_ARUBA,
        Emoji.FLAG_ALAND_ISLANDS,
        Emoji.FLAG_AZERBAIJAN,
        Emoji.FLAG_BOSNIA_AND_HERZEGOVINA,
        Emoji.FLAG_BARBADOS,
        Emoji.FLAG_BANGLADESH,
        Emoji.FLAG_BELGIUM,
        Emoji.FLAG_BURKINA_FASO,
        Emoji.FLAG_BULGARIA,
        Emoji.FLAG_BAHRAIN,
        Emoji.FLAG_BURUNDI,
        Emoji.FLAG_BENIN,
        Emoji.FLAG_ST_BARTHELEMY,
        Emoji.FLAG_BERMUDA,
        Emoji.FLAG_BRUNEI,
        Emoji.FLAG_BOLIVIA,
        Emoji.FLAG_CARIBBEAN_NETHERLANDS,
        Emoji.FLAG_BRAZIL,
        Emoji.FLAG_BAHAMAS,
        Emoji.FLAG_BHUTAN,
        Emoji.FLAG_BOUVET_ISLAND,
        Emoji.FLAG_BOTSWANA,
        Emoji.FLAG_BELARUS,
        Emoji.FLAG_BELIZE,
        Emoji.FLAG_CANADA,
        Emoji.FLAG_COCOS_KEELING_ISLANDS,
        Emoji.FLAG_CONGO_KINSHASA,
        Emoji.FLAG_CENTRAL_AFRICAN_REPUBLIC,
        Emoji.FLAG_CONGO_BRAZZAVILLE,
        Emoji.FLAG_SWITZERLAND,
        Emoji.FLAG_COTE_DIVOIRE,
        Emoji.FLAG_COOK_ISLANDS,
        Emoji.FLAG_CHILE,
        Emoji.FLAG_CAMEROON,
        Emoji.FLAG_CHINA,
        Emoji.FLAG_COLOMBIA,
        Emoji.FLAG_CLIPPERTON_ISLAND,
        Emoji.FLAG_COSTA_RICA,
        Emoji.FLAG_CUBA,
        Emoji.FLAG_CAPE_VERDE,
        Emoji.FLAG_CURACAO,
        Emoji.FLAG_CHRISTMAS_ISLAND,
        Emoji.FLAG_CYPRUS,
        Emoji.FLAG_CZECHIA,
        Emoji.FLAG_GERMANY,
        Emoji.FLAG_DIEGO_GARCIA,
        Emoji.FLAG_DJIBOUTI,
        Emoji.FLAG_DENMARK,
        Emoji.FLAG_DOMINICA,
        Emoji.FLAG_DOMINICAN_REPUBLIC,
        Emoji.FLAG_ALGERIA,
        Emoji.FLAG_CEUTA_AND_MELILLA,
        Emoji.FLAG_ECUADOR,
        Emoji.FLAG_ESTONIA,
        Emoji.FLAG_EGYPT,
        Emoji.FLAG_WESTERN_SAHARA,
        Emoji.FLAG_ERITREA,
        Emoji.FLAG_SPAIN,
        Emoji.FLAG_ETHIOPIA,
        Emoji.FLAG_EUROPEAN_UNION,
        Emoji.FLAG_FINLAND,
        Emoji.FLAG_FIJI,
        Emoji.FLAG_FALKLAND_ISLANDS,
        Emoji.FLAG_MICRONESIA,
        Emoji.FLAG_FAROE_ISLANDS,
        Emoji.FLAG_FRANCE,
        Emoji.FLAG_GABON,
        Emoji.FLAG_UNITED_KINGDOM,
        Emoji.FLAG_GRENADA,
        Emoji.FLAG_GEORGIA,
        Emoji.FLAG_FRENCH_GUIANA,
        Emoji.FLAG_GUERNSEY,
        Emoji.FLAG_GHANA,
        Emoji.FLAG_GIBRALTAR,
        Emoji.FLAG_GREENLAND,
        Emoji.FLAG_GAMBIA,
        Emoji.FLAG_GUINEA,
        Emoji.FLAG_GUADELOUPE,
        Emoji.FLAG_EQUATORIAL_GUINEA,
        Emoji.FLAG_GREECE,
        Emoji.FLAG_SOUTH_GEORGIA_AND_SOUTH_SANDWICH_ISLANDS,
        Emoji.FLAG_GUATEMALA,
        Emoji.FLAG_GUAM,
        Emoji.FLAG_GUINEA_BISSAU,
        Emoji.FLAG_GUYANA,
        Emoji.FLAG_HONG_KONG_SAR_CHINA,
        Emoji.FLAG_HEARD_AND_MCDONALD_ISLANDS,
        Emoji.FLAG_HONDURAS,
        Emoji.FLAG_CROATIA,
        Emoji.FLAG_HAITI,
        Emoji.FLAG_HUNGARY,
        Emoji.FLAG_CANARY_ISLANDS,
        Emoji.FLAG_INDONESIA,
        Emoji.FLAG_IRELAND,
        Emoji.FLAG_ISRAEL,
        Emoji.FLAG_ISLE_OF_MAN,
        Emoji.FLAG_INDIA,
        Emoji.FLAG_BRITISH_INDIAN_OCEAN_TERRITORY,
        Emoji.FLAG_IRAQ,
        Emoji.FLAG_IRAN,
        Emoji.FLAG_ICELAND,
        Emoji.FLAG_ITALY,
        Emoji.FLAG_JERSEY,
        Emoji.FLAG_JAMAICA,
        Emoji.FLAG_JORDAN,
        Emoji.FLAG_JAPAN,
        Emoji.FLAG_KENYA,
        Emoji.FLAG_KYRGYZSTAN,
        Emoji.FLAG_CAMBODIA,
        Emoji.FLAG_KIRIBATI,
        Emoji.FLAG_COMOROS,
        Emoji.FLAG_ST_KITTS_AND_NEVIS,
        Emoji.FLAG_NORTH_KOREA,
        Emoji.FLAG_SOUTH_KOREA,
        Emoji.FLAG_KUWAIT,
        Emoji.FLAG_CAYMAN_ISLANDS,
        Emoji.FLAG_KAZAKHSTAN,
        Emoji.FLAG_LAOS,
        Emoji.FLAG_LEBANON,
        Emoji.FLAG_ST_LUCIA,
        Emoji.FLAG_LIECHTENSTEIN,
        Emoji.FLAG_SRI_LANKA,
        Emoji.FLAG_LIBERIA,
        Emoji.FLAG_LESOTHO,
        Emoji.FLAG_LITHUANIA,
        Emoji.FLAG_LUXEMBOURG,
        Emoji.FLAG_LATVIA,
        Emoji.FLAG_LIBYA,
        Emoji.FLAG_MOROCCO,
        Emoji.FLAG_MONACO,
        Emoji.FLAG_MOLDOVA,
        Emoji.FLAG_MONTENEGRO,
        Emoji.FLAG_ST_MARTIN,
        Emoji.FLAG_MADAGASCAR,
        Emoji.FLAG_MARSHALL_ISLANDS,
        Emoji.FLAG_NORTH_MACEDONIA,
        Emoji.FLAG_MALI,
        Emoji.FLAG_MYANMAR_BURMA,
        Emoji.FLAG_MONGOLIA,
        Emoji.FLAG_MACAO_SAR_CHINA,
        Emoji.FLAG_NORTHERN_MARIANA_ISLANDS,
        Emoji.FLAG_MARTINIQUE,
        Emoji.FLAG_MAURITANIA,
        Emoji.FLAG_MONTSERRAT,
        Emoji.FLAG_MALTA,
        Emoji.FLAG_MAURITIUS,
        Emoji.FLAG_MALDIVES,
        Emoji.FLAG_MALAWI,
        Emoji.FLAG_MEXICO,
        Emoji.FLAG_MALAYSIA,
        Emoji.FLAG_MOZAMBIQUE,
        Emoji.FLAG_NAMIBIA,
        Emoji.FLAG_NEW_CALEDONIA,
        Emoji.FLAG_NIGER,
        Emoji.FLAG_NORFOLK_ISLAND,
        Emoji.FLAG_NIGERIA,
        Emoji.FLAG_NICARAGUA,
        Emoji.FLAG_NETHERLANDS,
        Emoji.FLAG_NORWAY,
        Emoji.FLAG_NEPAL,
        Emoji.FLAG_NAURU,
        Emoji.FLAG_NIUE,
        Emoji.FLAG_NEW_ZEALAND,
        Emoji.FLAG_OMAN,
        Emoji.FLAG_PANAMA,
        Emoji.FLAG_PERU,
        Emoji.FLAG_FRENCH_POLYNESIA,
        Emoji.FLAG_PAPUA_NEW_GUINEA,
        Emoji.FLAG_PHILIPPINES,
        Emoji.FLAG_PAKISTAN,
        Emoji.FLAG_POLAND,
        Emoji.FLAG_ST_PIERRE_AND_MIQUELON,
        Emoji.FLAG_PITCAIRN_ISLANDS,
        Emoji.FLAG_PUERTO_RICO,
        Emoji.FLAG_PALESTINIAN_TERRITORIES,
        Emoji.FLAG_PORTUGAL,
        Emoji.FLAG_PALAU,
        Emoji.FLAG_PARAGUAY,
        Emoji.FLAG_QATAR,
        Emoji.FLAG_REUNION,
        Emoji.FLAG_ROMANIA,
        Emoji.FLAG_SERBIA,
        Emoji.FLAG_RUSSIA,
        Emoji.FLAG_RWANDA,
        Emoji.FLAG_SAUDI_ARABIA,
        Emoji.FLAG_SOLOMON_ISLANDS,
        Emoji.FLAG_SEYCHELLES,
        Emoji.FLAG_SUDAN,
        Emoji.FLAG_SWEDEN,
        Emoji.FLAG_SINGAPORE,
        Emoji.FLAG_ST_HELENA,
        Emoji.FLAG_SLOVENIA,
        Emoji.FLAG_SVALBARD_AND_JAN_MAYEN,
        Emoji.FLAG_SLOVAKIA,
        Emoji.FLAG_SIERRA_LEONE,
        Emoji.FLAG_SAN_MARINO,
        Emoji.FLAG_SENEGAL,
        Emoji.FLAG_SOMALIA,
        Emoji.FLAG_SURINAME,
        Emoji.FLAG_SOUTH_SUDAN,
        Emoji.FLAG_SAO_TOME_AND_PRINCIPE,
        Emoji.FLAG_EL_SALVADOR,
        Emoji.FLAG_SINT_MAARTEN,
        Emoji.FLAG_SYRIA,
        Emoji.FLAG_ESWATINI,
        Emoji.FLAG_TRISTAN_DA_CUNHA,
        Emoji.FLAG_TURKS_AND_CAICOS_ISLANDS,
        Emoji.FLAG_CHAD,
        Emoji.FLAG_FRENCH_SOUTHERN_TERRITORIES,
        Emoji.FLAG_TOGO,
        Emoji.FLAG_THAILAND,
        Emoji.FLAG_TAJIKISTAN,
        Emoji.FLAG_TOKELAU,
        Emoji.FLAG_TIMOR_LESTE,
        Emoji.FLAG_TURKMENISTAN,
        Emoji.FLAG_TUNISIA,
        Emoji.FLAG_TONGA,
        Emoji.FLAG_TURKIYE,
        Emoji.FLAG_TRINIDAD_AND_TOBAGO,
        Emoji.FLAG_TUVALU,
        Emoji.FLAG_TAIWAN,
        Emoji.FLAG_TANZANIA,
        Emoji.FLAG_UKRAINE,
        Emoji.FLAG_UGANDA,
        Emoji.FLAG_U_S_OUTLYING_ISLANDS,
        Emoji.FLAG_UNITED_NATIONS,
        Emoji.FLAG_UNITED_STATES,
        Emoji.FLAG_URUGUAY,
        Emoji.FLAG_UZBEKISTAN,
        Emoji.FLAG_VATICAN_CITY,
        Emoji.FLAG_ST_VINCENT_AND_GRENADINES,
        Emoji.FLAG_VENEZUELA,
        Emoji.FLAG_BRITISH_VIRGIN_ISLANDS,
        Emoji.FLAG_U_S_VIRGIN_ISLANDS,
        Emoji.FLAG_VIETNAM,
        Emoji.FLAG_VANUATU,
        Emoji.FLAG_WALLIS_AND_FUTUNA,
        Emoji.FLAG_SAMOA,
        Emoji.FLAG_KOSOVO,
        Emoji.FLAG_YEMEN,
        Emoji.FLAG_MAYOTTE,
        Emoji.FLAG_SOUTH_AFRICA,
        Emoji.FLAG_ZAMBIA,
        Emoji.FLAG_ZIMBABWE,
        Emoji.FLAG_ENGLAND,
        Emoji.FLAG_SCOTLAND,
        Emoji.FLAG_WALES,
    ),
}
