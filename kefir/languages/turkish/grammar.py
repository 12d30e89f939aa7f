"""Turkish grammar configuration for inflection tables."""
from kefir.languages.base import (
    CaseConfig,
    CopulaConfig,
    GrammarConfig,
    NumberConfig,
    PersonConfig,
)

# Case configurations with question-word hints
CASE_CONFIGS = [
    CaseConfig(
        id="nominative",
        label="Nominative",
        hint="kim? ne? (who? what?)",
        example="ev",
    ),
    CaseConfig(
        id="genitive",
        label="Genitive",
        hint="kimin? neyin? (whose? of what?)",
        example="evin",
    ),
    CaseConfig(
        id="dative",
        label="Dative",
        hint="kime? neye? (to whom? to what?)",
        example="eve",
    ),
    CaseConfig(
        id="accusative",
        label="Accusative",
        hint="kimi? neyi? (whom? what?)",
        example="evi",
    ),
    CaseConfig(
        id="ablative",
        label="Ablative",
        hint="kimden? neden? (from whom? from what?)",
        example="evden",
    ),
    CaseConfig(
        id="locative",
        label="Locative",
        hint="kimde? nerede? (on whom? where?)",
        example="evde",
    ),
]

PERSON_CONFIGS = [
    PersonConfig(id="first", label="First"),
    PersonConfig(id="second", label="Second"),
    PersonConfig(id="third", label="Third"),
]

NUMBER_CONFIGS = [
    NumberConfig(id="singular", label="Singular"),
    NumberConfig(id="plural", label="Plural"),
]

# One sample form per copula
COPULA_CONFIGS = [
    CopulaConfig(id="zero", label="Zero", example="yolcu"),
    CopulaConfig(id="negative", label="Negative", example="yolcu değil"),
    CopulaConfig(id="tobe", label="To be (-DIr)", example="yolcudur"),
    CopulaConfig(id="personal", label="Personal", example="oralısın"),
    CopulaConfig(id="inferential", label="Inferential (-mIş)", example="adaymış"),
    CopulaConfig(id="conditional", label="Conditional (-sA)", example="elmaysa"),
    CopulaConfig(id="perfective", label="Perfective (-DI)", example="daldaydı"),
    CopulaConfig(id="imperfective", label="Imperfective (-Iyor)", example="dalıyor"),
    CopulaConfig(id="future", label="Future (-AcAk)", example="gelecek"),
    CopulaConfig(id="progressive", label="Progressive (-mAktA)", example="gelmekteyim"),
    CopulaConfig(id="necessitative", label="Necessitative (-mAlI)", example="gitmeliyim"),
    CopulaConfig(id="impotential", label="Impotential (-(y)AmA)", example="gidemez"),
]

TURKISH_GRAMMAR_CONFIG = GrammarConfig(
    cases=CASE_CONFIGS,
    persons=PERSON_CONFIGS,
    numbers=NUMBER_CONFIGS,
    copulas=COPULA_CONFIGS,
    has_declension=True,
    has_predication=True,
)
