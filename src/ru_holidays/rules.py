"""
Historical holiday rules of the Russian Federation and its regions.

Sources:
    http://ru.wikipedia.org/wiki/История_праздников_России
    http://www.consultant.ru/popular/kzot/54_6.html#p530
    http://www.consultant.ru/document/cons_doc_LAW_127924/?frame=17#p1681
    http://base.garant.ru/4029129/

Region codes follow ISO 3166-2:RU without the "RU-" prefix.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from .floating import Tabulator, eid_al_adha, eid_al_fitr, radonitsa
from .versioned import Computed, DaySetSource, Fixed, YearVersionedValue


def _to_day_source(value: Any) -> Optional[DaySetSource]:
    if value is None or isinstance(value, (Fixed, Computed)):
        return value
    if isinstance(value, (str, list, tuple)):
        return Fixed.of(value)
    if callable(value):
        return Computed(value)
    raise ValueError(f"Unsupported days value: {value!r}")


class HolidayRule(BaseModel):
    """A holiday whose name and days may change over the years.

    name: YearVersionedValue of labels
    days: YearVersionedValue of Fixed / Computed sources, None once abolished
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    key: str
    name: YearVersionedValue
    days: YearVersionedValue

    @field_validator("name", mode="before")
    @classmethod
    def coerce_name(cls, v: Any) -> YearVersionedValue:
        if isinstance(v, YearVersionedValue):
            return v
        if isinstance(v, str):
            return YearVersionedValue.constant(v)
        if isinstance(v, Mapping):
            if not v:
                raise ValueError("name must not be empty")
            return YearVersionedValue(dict(v))
        raise ValueError(f"Unsupported name value: {v!r}")

    @field_validator("days", mode="before")
    @classmethod
    def coerce_days(cls, v: Any) -> YearVersionedValue:
        if isinstance(v, YearVersionedValue):
            return v
        if not isinstance(v, Mapping) or not v:
            raise ValueError("days must be a non-empty mapping of year to days")
        return YearVersionedValue({int(year): _to_day_source(days) for year, days in v.items()})


def build_rules(table: Mapping[str, Mapping[str, Any]]) -> dict[str, HolidayRule]:
    """Validates raw rule entries keyed by symbolic name."""
    return {
        key: HolidayRule.model_validate({"key": key, **entry})
        for key, entry in table.items()
    }


NATIONWIDE_HOLIDAYS = build_rules({
    "new_year": {
        "name": {
            1948: "Новый год",
            2005: "Новогодние каникулы",
        },
        "days": {
            1948: "0101",
            1992: ["0101", "0102"],
            2005: ["0101", "0102", "0103", "0104", "0105"],
            2013: ["0101", "0102", "0103", "0104", "0105", "0106", "0108"],
        },
    },
    "christmas": {
        "name": "Рождество Христово",
        "days": {1991: "0107"},
    },
    "defenders_day": {
        "name": "День защитника Отечества",
        "days": {2002: "0223"},
    },
    "womens_day": {
        "name": "Международный женский день",
        "days": {1966: "0308"},
    },
    "workers_day": {
        "name": {
            1965: "День международной солидарности трудящихся",
            1992: "Праздник Весны и Труда",
        },
        "days": {
            1965: ["0501", "0502"],
            2005: "0501",
        },
    },
    "victory_day": {
        "name": "День Победы",
        "days": {1965: "0509"},
    },
    "russia_day": {
        "name": {
            1992: "День принятия декларации о государственном суверенитете Российской Федерации",
            2002: "День России",
        },
        "days": {1992: "0612"},
    },
    "unity_day": {
        "name": "День народного единства",
        "days": {2005: "1104"},
    },
    "revolution_day": {
        "name": {
            1965: "Годовщина Великой Октябрьской социалистической революции",
            1996: "День согласия и примирения",
        },
        "days": {
            1928: ["1107", "1108"],
            1992: "1107",
            2005: None,
        },
    },
    "constitution_day": {
        "name": "День Конституции Российской Федерации",
        "days": {
            1994: "1212",
            2005: None,
        },
    },
})


REGIONAL_HOLIDAYS = {
    region: build_rules(rules)
    for region, rules in {
        "AD": {
            "republic_day": {
                "name": "День образования Республики Адыгея",
                "days": {2006: "1005"},
            },
            "eid_al_fitr": {
                "name": "Ураза-Байрам",
                "days": {2006: eid_al_fitr},
            },
        },
        "AL": {
            "tsagaan_sar": {
                "name": "Чага-Байрам",
                "days": {2013: Tabulator({2013: "0217", 2014: "0202", 2015: "0222"})},
            },
        },
        # http://variant52.ru/kalendar/proizvodstvennyj-kalendar-rb-2015.htm
        "BA": {
            "republic_day": {
                "name": "День Республики",
                "days": {2005: "1011"},
            },
            "constitution_day": {
                "name": "День Конституции Республики Башкортостан",
                "days": {2005: "1224", 2010: None},
            },
            "eid_al_fitr": {
                "name": "Ураза-Байрам",
                "days": {2005: eid_al_fitr},
            },
            "eid_al_adha": {
                "name": "Курбан-Байрам",
                "days": {2005: eid_al_adha},
            },
        },
        "BU": {
            "tsagaan_sar": {
                "name": "Сагаалган",
                "days": {2009: Tabulator({})},
            },
        },
        "DA": {
            "constitution_day": {
                "name": "День Конституции Республики Дагестан",
                "days": {1995: "0726"},
            },
            "unity_day": {
                "name": "День единства народов Дагестана",
                "days": {2011: "0915"},
            },
            "eid_al_fitr": {
                "name": "Ураза-Байрам",
                "days": {1991: eid_al_fitr},
            },
            "eid_al_adha": {
                "name": "Курбан-Байрам",
                "days": {2000: eid_al_adha},
            },
        },
        "IN": {
            "republic_day": {
                "name": "День образования республики Ингушетия",
                "days": {1996: "0604", 2004: None},
            },
        },
        "KB": {
            "revival_day": {
                "name": "День возрождения балкарского народа",
                "days": {1994: "0328"},
            },
            "memorial_day": {
                "name": "День памяти адыгов (черкесов) - жертв Русско-Кавказской войны",
                "days": {1992: "0521"},
            },
            "republic_day": {
                "name": "День Республики",
                "days": {1997: "0901"},
            },
        },
        "KL": {
            "constitution_day": {
                "name": "День принятия Степного Уложения (Конституции) Республики Калмыкия",
                "days": {2005: "0405"},
            },
            "memorial_day": {
                "name": "День памяти жертв депортации калмыцкого народа",
                "days": {2005: "1228"},
            },
            "tsagaan_sar": {
                "name": "Цаган Сар",
                "days": {2005: Tabulator({})},
            },
            "buddha_day": {
                "name": "День рождения Будды Шакьямуни",
                "days": {2005: Tabulator({})},
            },
            "zula": {
                "name": "Зул",
                "days": {2005: Tabulator({})},
            },
        },
        "KC": {
            "revival_day": {
                "name": "День возрождения карачаевского народа",
                "days": {2001: "0503"},
            },
        },
        "SA": {
            "republic_day": {
                "name": "День Республики Саха (Якутия)",
                "days": {1992: "0427"},
            },
            "yhyakh": {
                "name": 'День национального  праздника "Ысыах"',
                "days": {1992: "0621"},
            },
        },
        # http://mtsz.tatarstan.ru/rus/info.php?id=131384
        "TA": {
            "republic_day": {
                "name": "День Республики Татарстан",
                "days": {1992: "0830"},
            },
            "constitution_day": {
                "name": "День Конституции Республики Татарстан",
                "days": {1992: "1106"},
            },
            "eid_al_fitr": {
                "name": "Ураза-Байрам",
                "days": {2011: eid_al_fitr},
            },
            "eid_al_adha": {
                "name": "Курбан-Байрам",
                "days": {1992: eid_al_adha},
            },
        },
        "TY": {
            "constitution_day": {
                "name": "День Конституции Республики Тыва",
                "days": {1999: "0506"},
            },
            "republic_day": {
                "name": "День Республики Тыва",
                "days": {1999: "0815"},
            },
            "tsagaan_sar": {
                "name": "Шагаа",
                "days": {1999: Tabulator({})},
            },
            "naadym": {
                "name": "Наадым",
                "days": {1999: Tabulator({})},
            },
        },
        "CE": {
            "peace_day": {
                "name": "День мира в Чеченской Республике",
                "days": {2010: "0416"},
            },
        },
        "CU": {
            "republic_day": {
                "name": "День Республики",
                "days": {2000: "0624"},
            },
        },
        "SAR": {
            "radonitsa": {
                "name": "Радоница - день поминовения усопших",
                "days": {2012: radonitsa},
            },
        },
    }.items()
}
