"""Settlement generator.

A settlement is a name (prefix + suffix), some establishments and a piece of
news. Villages have few establishments and read the establishment table with
a d6, so they only ever get the first six entries. Cities read it with a d10.

The establishment count is 1d6 rolled twice: villages keep the lower roll,
cities the higher. An "Artisan" establishment is rolled straight away on the
artisan table.
"""

from __future__ import annotations

from juiceroll.data import settlement as data
from juiceroll.dice import RollEngine, Skew
from juiceroll.models import (
    EstablishmentCountResult,
    EstablishmentNameResult,
    SettlementDetailResult,
    SettlementNameResult,
    SettlementResult,
    SettlementType,
)
from juiceroll.oracles.details import roll_color
from juiceroll.oracles.random_event import IDEA_TABLES
from juiceroll.options import parse_option
from juiceroll.tables import LookupTable

PREFIX_TABLE = LookupTable.from_sequence("settlement prefix", data.NAME_PREFIXES)
SUFFIX_TABLE = LookupTable.from_sequence("settlement suffix", data.NAME_SUFFIXES)
ESTABLISHMENT_TABLE = LookupTable.from_sequence("establishment", data.ESTABLISHMENTS)
ARTISAN_TABLE = LookupTable.from_sequence("artisan", data.ARTISANS)
NEWS_TABLE = LookupTable.from_sequence("news", data.NEWS)

VILLAGE_DIE = 6
CITY_DIE = 10

COUNT_SKEWS: dict[SettlementType, Skew] = {
    SettlementType.village: Skew.disadvantage,
    SettlementType.city: Skew.advantage,
}


def parse_settlement_type(value: SettlementType | str | None) -> SettlementType:
    return parse_option(SettlementType, value, SettlementType.village)


def generate_name(engine: RollEngine | None = None) -> SettlementNameResult:
    """2d10: prefix and suffix, joined into one word."""
    engine = engine or RollEngine()
    prefix_roll, suffix_roll = engine.roll_dice(2, 10)
    prefix = PREFIX_TABLE.lookup(prefix_roll, default=data.NAME_PREFIXES[-1])
    suffix = SUFFIX_TABLE.lookup(suffix_roll, default=data.NAME_SUFFIXES[-1])
    name = f"{prefix}{suffix}"
    return SettlementNameResult(
        description="Settlement Name",
        dice_results=[prefix_roll, suffix_roll],
        total=prefix_roll + suffix_roll,
        interpretation=name,
        prefix_roll=prefix_roll,
        prefix=prefix,
        suffix_roll=suffix_roll,
        suffix=suffix,
        name=name,
    )


def roll_artisan(engine: RollEngine | None = None) -> SettlementDetailResult:
    engine = engine or RollEngine()
    roll = engine.roll_die(10)
    artisan = ARTISAN_TABLE.lookup(roll, default=data.ARTISANS[-1])
    return SettlementDetailResult(
        description="Artisan",
        dice_results=[roll],
        total=roll,
        interpretation=artisan,
        detail_type="artisan",
        roll=roll,
        result=artisan,
        detail_description=data.ARTISAN_DESCRIPTIONS.get(artisan),
    )


def roll_establishment(
    is_village: bool = False, *, engine: RollEngine | None = None
) -> SettlementDetailResult:
    """Roll one establishment; an Artisan also rolls which craft."""
    engine = engine or RollEngine()
    die_size = VILLAGE_DIE if is_village else CITY_DIE
    roll = engine.roll_die(die_size)
    establishment = ESTABLISHMENT_TABLE.lookup(roll, default=data.ESTABLISHMENTS[-1])
    dice = [roll]
    sub_roll = sub_result = None
    interpretation = establishment
    detail = data.ESTABLISHMENT_DESCRIPTIONS.get(establishment)
    if establishment == data.ARTISAN:
        artisan = roll_artisan(engine)
        sub_roll, sub_result = artisan.roll, artisan.result
        dice.append(sub_roll)
        interpretation = f"{sub_result} ({establishment})"
        detail = artisan.detail_description
    return SettlementDetailResult(
        description=f"Establishment (d{die_size})",
        dice_results=dice,
        total=roll,
        interpretation=interpretation,
        detail_type="establishment",
        roll=roll,
        result=establishment,
        sub_roll=sub_roll,
        sub_result=sub_result,
        detail_description=detail,
        die_size=die_size,
    )


def roll_news(engine: RollEngine | None = None) -> SettlementDetailResult:
    engine = engine or RollEngine()
    roll = engine.roll_die(10)
    news = NEWS_TABLE.lookup(roll, default=data.NEWS[-1])
    return SettlementDetailResult(
        description="News",
        dice_results=[roll],
        total=roll,
        interpretation=news,
        detail_type="news",
        roll=roll,
        result=news,
        detail_description=data.NEWS_DESCRIPTIONS.get(news),
    )


def roll_establishment_count(
    settlement_type: SettlementType | str | None = SettlementType.village,
    *,
    engine: RollEngine | None = None,
) -> EstablishmentCountResult:
    engine = engine or RollEngine()
    settlement_type = parse_settlement_type(settlement_type)
    skew = COUNT_SKEWS[settlement_type]
    count, dice = engine.roll_with_skew(6, skew)
    return EstablishmentCountResult(
        description=f"Establishments (1d6{skew.symbol})",
        dice_results=dice,
        total=count,
        interpretation=f"{count} establishments",
        settlement_type=settlement_type,
        count=count,
        skew=skew,
    )


def generate_establishments(
    count: int, is_village: bool = False, *, engine: RollEngine | None = None
) -> list[SettlementDetailResult]:
    engine = engine or RollEngine()
    return [roll_establishment(is_village, engine=engine) for _ in range(max(0, count))]


def generate_establishment_name(engine: RollEngine | None = None) -> EstablishmentNameResult:
    """Color + object: "The Red Skull"."""
    engine = engine or RollEngine()
    color = roll_color(engine)
    object_roll = engine.roll_die(10)
    objects = IDEA_TABLES["object"]
    object_name = objects.lookup(object_roll, default=objects.results()[-1])
    short_color = color.result.split()[-1]
    name = f"The {short_color} {object_name}"
    return EstablishmentNameResult(
        description="Establishment Name",
        dice_results=[color.roll, object_roll],
        total=color.roll + object_roll,
        interpretation=f"{color.emoji} {name}" if color.emoji else name,
        color=color,
        short_color=short_color,
        object_roll=object_roll,
        object_name=object_name,
        name=name,
    )


def generate_full(engine: RollEngine | None = None) -> SettlementResult:
    """A quick sketch: name, one establishment off the full table and the news."""
    engine = engine or RollEngine()
    name = generate_name(engine)
    establishment = roll_establishment(False, engine=engine)
    news = roll_news(engine)
    return SettlementResult(
        description="Settlement",
        dice_results=[*name.dice_results, *establishment.dice_results, *news.dice_results],
        total=name.total + establishment.total + news.total,
        interpretation=f"{name.name} - {establishment.interpretation} - {news.result}",
        name=name,
        establishments=[establishment],
        news=news,
    )


def generate(
    settlement_type: SettlementType | str | None = SettlementType.village,
    *,
    engine: RollEngine | None = None,
) -> SettlementResult:
    """A whole village or city: name, establishment count, establishments, news."""
    engine = engine or RollEngine()
    settlement_type = parse_settlement_type(settlement_type)
    is_village = settlement_type is SettlementType.village
    name = generate_name(engine)
    count = roll_establishment_count(settlement_type, engine=engine)
    establishments = generate_establishments(count.count, is_village, engine=engine)
    news = roll_news(engine)

    dice = [*name.dice_results, *count.dice_results]
    for establishment in establishments:
        dice.extend(establishment.dice_results)
    dice.extend(news.dice_results)
    listed = ", ".join(e.interpretation or e.result for e in establishments)
    return SettlementResult(
        description=settlement_type.value.capitalize(),
        dice_results=dice,
        total=sum(dice),
        interpretation=(
            f"{settlement_type.value.capitalize()} of {name.name}\n"
            f"Establishments: {listed}\n"
            f"News: {news.result}"
        ),
        settlement_type=settlement_type,
        name=name,
        count=count,
        establishments=establishments,
        news=news,
    )
