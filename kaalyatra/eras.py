"""
Era definitions for Kaalyatra
Five eras spanning nearly 5,000 years of Indian history

Each era includes:
- Welcome description and timespan
- Key events (shown on arrival in every mode)
- Quiz questions, cultural highlights, figures and artifacts (scholar mode)

The raw table below is loaded once into immutable Era records.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple

ERAS = [
    # =========================================================================
    # ERA 1: INDUS VALLEY CIVILIZATION
    # =========================================================================
    {
        "id": "indus_valley",
        "name": "Indus Valley Civilization",
        "timespan": "c. 3300 - 1300 BCE",
        "description": "Welcome to the Indus Valley Civilization! Experience the "
                       "advanced urban planning and trade culture of ancient India.",

        "key_events": [
            "Development of Harappa and Mohenjo-Daro",
            "Trade with Mesopotamia",
            "Innovative city planning and drainage systems",
        ],

        "questions": [
            {
                "text": "Which of these cities belonged to the Indus Valley Civilization?",
                "choices": ["Pataliputra", "Mohenjo-Daro", "Hampi", "Delhi"],
                "answers": ["Mohenjo-Daro"],
                "explanation": "Mohenjo-Daro, on the banks of the Indus, was one of "
                               "the largest cities of the Bronze Age.",
            },
            {
                "text": "Which features are found in Indus Valley cities? (select all that apply)",
                "choices": [
                    "Covered drainage systems",
                    "Gunpowder fortifications",
                    "Standardized baked bricks",
                    "Printed paper currency",
                ],
                "answers": ["Covered drainage systems", "Standardized baked bricks"],
                "explanation": "Brick sizes followed a fixed ratio across the "
                               "civilization, and most houses connected to street drains.",
            },
            {
                "text": "With which distant region did Indus merchants trade?",
                "choices": ["Mesopotamia", "The Americas", "Australia", "Scandinavia"],
                "answers": ["Mesopotamia"],
                "explanation": "Mesopotamian texts mention 'Meluhha', widely "
                               "identified with the Indus region.",
            },
        ],

        "cultural_highlights": {
            "Urban Planning": "Grid-pattern streets, citadels and residential "
                              "quarters laid out centuries before most of the world.",
            "The Great Bath": "A watertight public bath at Mohenjo-Daro, probably "
                              "used for ritual bathing.",
            "Seals and Script": "Steatite seals carrying a script that remains "
                                "undeciphered to this day.",
        },

        "figures": [
            "The Priest-King - a bearded statuette whose identity is still debated",
            "Harappan merchants - traders reaching the Persian Gulf by sea",
            "Lothal dockworkers - builders of one of the oldest known dockyards",
        ],

        "artifacts": [
            "Dancing Girl bronze",
            "Pashupati seal",
            "Priest-King statuette",
        ],
    },

    # =========================================================================
    # ERA 2: GUPTA EMPIRE
    # =========================================================================
    {
        "id": "gupta_empire",
        "name": "Gupta Empire",
        "timespan": "c. 320 - 550 CE",
        "description": "Welcome to the Gupta Empire! Known as the Golden Age of India, "
                       "it was a time of cultural and scientific advancements.",

        "key_events": [
            "Flourishing of classical Indian art and literature",
            "Mathematical advances by Aryabhata",
            "Establishment of Nalanda University",
        ],

        "questions": [
            {
                "text": "Which Gupta-era scholar estimated the value of pi and proposed "
                        "that the Earth rotates on its axis?",
                "choices": ["Kalidasa", "Aryabhata", "Chanakya", "Tulsidas"],
                "answers": ["Aryabhata"],
                "explanation": "Aryabhata's Aryabhatiya (499 CE) covers arithmetic, "
                               "algebra and astronomy.",
            },
            {
                "text": "Which of these are associated with the Gupta Golden Age? "
                        "(select all that apply)",
                "choices": [
                    "Kalidasa's Shakuntala",
                    "The Taj Mahal",
                    "Nalanda University",
                    "The Red Fort",
                ],
                "answers": ["Kalidasa's Shakuntala", "Nalanda University"],
                "explanation": "Kalidasa wrote at the Gupta court and Nalanda was "
                               "founded under Kumaragupta I. The Taj Mahal and Red "
                               "Fort are Mughal monuments.",
            },
        ],

        "cultural_highlights": {
            "Literature": "Sanskrit drama and poetry reach their classical form "
                          "in the works of Kalidasa.",
            "Mathematics": "The decimal place-value system and the concept of "
                           "zero are put to systematic use.",
            "Art": "The serene Buddha images of Sarnath and the early Ajanta "
                   "paintings define Indian classical art.",
        },

        "figures": [
            "Chandragupta I - founder of the imperial Gupta line",
            "Samudragupta - conqueror and patron of music",
            "Kalidasa - the greatest poet of classical Sanskrit",
            "Aryabhata - mathematician and astronomer",
        ],

        "artifacts": [
            "Gold dinar of Samudragupta",
            "Iron Pillar of Delhi",
            "Sarnath Buddha",
        ],
    },

    # =========================================================================
    # ERA 3: MUGHAL EMPIRE
    # =========================================================================
    {
        "id": "mughal_empire",
        "name": "Mughal Empire",
        "timespan": "1526 - 1857 CE",
        "description": "Welcome to the Mughal Empire! Experience the cultural synthesis, "
                       "grand architecture, and bustling trade routes.",

        "key_events": [
            "Reign of Akbar, the Great",
            "Construction of the Taj Mahal",
            "Flourishing trade and cultural synthesis",
        ],

        "questions": [
            {
                "text": "Which Mughal emperor commissioned the Taj Mahal?",
                "choices": ["Babur", "Akbar", "Shah Jahan", "Aurangzeb"],
                "answers": ["Shah Jahan"],
                "explanation": "Shah Jahan built the Taj Mahal in memory of his "
                               "wife Mumtaz Mahal.",
            },
            {
                "text": "Which battle in 1526 founded Mughal rule in India?",
                "choices": [
                    "First Battle of Panipat",
                    "Battle of Plassey",
                    "Battle of Haldighati",
                    "Battle of Talikota",
                ],
                "answers": ["First Battle of Panipat"],
                "explanation": "Babur defeated Ibrahim Lodi at Panipat in 1526.",
            },
            {
                "text": "Which of these were policies of Akbar? (select all that apply)",
                "choices": [
                    "Abolition of the jizya tax",
                    "The Mansabdari system",
                    "The Doctrine of Lapse",
                    "Sulh-i-kul, peace with all",
                ],
                "answers": [
                    "Abolition of the jizya tax",
                    "The Mansabdari system",
                    "Sulh-i-kul, peace with all",
                ],
                "explanation": "The Doctrine of Lapse was a British East India "
                               "Company policy of the 1840s.",
            },
        ],

        "cultural_highlights": {
            "Architecture": "Persian, Timurid and Indian styles blend in Humayun's "
                            "Tomb, Fatehpur Sikri and the Taj Mahal.",
            "Miniature Painting": "Court ateliers produce richly detailed "
                                  "manuscripts such as the Akbarnama.",
            "Language": "Urdu emerges from the mingling of Persian and local "
                        "languages in army camps and markets.",
        },

        "figures": [
            "Babur - founder of the dynasty",
            "Akbar - reformer who sought harmony between faiths",
            "Shah Jahan - builder of the Taj Mahal",
            "Nur Jahan - empress who issued coins in her own name",
        ],

        "artifacts": [
            "Akbarnama manuscript",
            "Peacock Throne",
            "Jade wine cup of Shah Jahan",
        ],
    },

    # =========================================================================
    # ERA 4: MAURYA EMPIRE
    # =========================================================================
    {
        "id": "maurya_empire",
        "name": "Maurya Empire",
        "timespan": "322 - 185 BCE",
        "description": "Welcome to the Maurya Empire! Witness the unification of India "
                       "under Ashoka and the spread of Buddhism.",

        "key_events": [
            "Reign of Emperor Chandragupta Maurya",
            "Kautilya's Arthashastra",
            "Ashoka's propagation of Buddhism",
        ],

        "questions": [
            {
                "text": "Which war led Ashoka to renounce conquest and embrace Buddhism?",
                "choices": [
                    "The Kalinga War",
                    "The Battle of Hydaspes",
                    "The Battle of Panipat",
                    "The Kurukshetra War",
                ],
                "answers": ["The Kalinga War"],
                "explanation": "Ashoka's Rock Edict XIII records his remorse over "
                               "the slaughter in Kalinga.",
            },
            {
                "text": "Who wrote the Arthashastra, a treatise on statecraft?",
                "choices": ["Megasthenes", "Kautilya", "Banabhatta", "Panini"],
                "answers": ["Kautilya"],
                "explanation": "Kautilya, also called Chanakya, advised Chandragupta "
                               "Maurya.",
            },
        ],

        "cultural_highlights": {
            "Edicts of Ashoka": "Rock and pillar inscriptions spread the message "
                                "of dhamma across the subcontinent.",
            "Administration": "A centralized bureaucracy with spies, tax officials "
                              "and provincial governors.",
            "Stupas": "The Great Stupa at Sanchi begins as an Ashokan monument.",
        },

        "figures": [
            "Chandragupta Maurya - founder of the empire",
            "Kautilya - strategist and author of the Arthashastra",
            "Ashoka - emperor who turned from conquest to dhamma",
            "Megasthenes - Greek ambassador at Pataliputra",
        ],

        "artifacts": [
            "Lion Capital of Sarnath",
            "Didarganj Yakshi",
            "Ashokan edict fragment",
        ],
    },

    # =========================================================================
    # ERA 5: MARATHA EMPIRE
    # =========================================================================
    {
        "id": "maratha_empire",
        "name": "Maratha Empire",
        "timespan": "1674 - 1818 CE",
        "description": "Welcome to the Maratha Empire! Explore the rise of the Marathas "
                       "and their resistance against the Mughal Empire.",

        "key_events": [
            "Shivaji's establishment of the Maratha kingdom",
            "Battles of Panipat",
            "Expansion under the Peshwas",
        ],

        "questions": [
            {
                "text": "In which year was Shivaji crowned Chhatrapati at Raigad?",
                "choices": ["1526", "1674", "1761", "1857"],
                "answers": ["1674"],
                "explanation": "Shivaji's coronation at Raigad Fort in 1674 marks "
                               "the founding of the Maratha kingdom.",
            },
            {
                "text": "Which of these were hallmarks of Maratha power? "
                        "(select all that apply)",
                "choices": [
                    "Hill forts such as Raigad and Sinhagad",
                    "A navy built up by Kanhoji Angre",
                    "The construction of the Qutb Minar",
                    "Guerrilla warfare tactics",
                ],
                "answers": [
                    "Hill forts such as Raigad and Sinhagad",
                    "A navy built up by Kanhoji Angre",
                    "Guerrilla warfare tactics",
                ],
                "explanation": "The Qutb Minar dates from the Delhi Sultanate, "
                               "centuries earlier.",
            },
        ],

        "cultural_highlights": {
            "Forts": "A network of more than 300 hill and sea forts anchors "
                     "Maratha defence.",
            "Ashtapradhan": "Shivaji's council of eight ministers runs the state.",
        },

        "figures": [
            "Shivaji - founder of the Maratha kingdom",
            "Tarabai - regent who held off Aurangzeb's armies",
            "Bajirao I - Peshwa who expanded Maratha power northward",
        ],

        "artifacts": [
            "Bhavani sword",
            "Wagh nakh (tiger claws)",
            "Peshwa seal",
        ],
    },
]


# =============================================================================
# ERA RECORDS
# =============================================================================

@dataclass(frozen=True)
class Question:
    """
    A quiz question.

    Single-choice questions have exactly one correct answer. A question is
    multi-choice when it lists several correct answers or is flagged ``multi``;
    it is then answered with a set of choices and scored all-or-nothing.
    """

    text: str
    choices: Tuple[str, ...]
    correct_answers: Tuple[str, ...]
    explanation: str = ""
    multi: bool = False

    def __post_init__(self):
        if not self.choices:
            raise ValueError(f"Question has no choices: {self.text!r}")
        if not self.correct_answers:
            raise ValueError(f"Question has no correct answer: {self.text!r}")
        missing = [a for a in self.correct_answers if a not in self.choices]
        if missing:
            raise ValueError(
                f"Correct answer(s) {missing} not among choices for {self.text!r}"
            )

    @property
    def is_multi_choice(self) -> bool:
        return self.multi or len(self.correct_answers) > 1

    @property
    def correct_answer(self) -> str:
        """The (first) correct answer, as shown for single-choice questions"""
        return self.correct_answers[0]

    @property
    def correct_indices(self) -> FrozenSet[int]:
        """1-based positions of the correct answers"""
        return frozenset(
            i for i, choice in enumerate(self.choices, start=1)
            if choice in self.correct_answers
        )

    def check_choices(self, selected: Iterable[str]) -> bool:
        """Exact set match - no partial credit"""
        return set(selected) == set(self.correct_answers)

    @classmethod
    def from_dict(cls, data: Dict) -> "Question":
        return cls(
            text=data["text"],
            choices=tuple(data["choices"]),
            correct_answers=tuple(data["answers"]),
            explanation=data.get("explanation", ""),
            multi=data.get("multi", False),
        )


@dataclass(frozen=True)
class Era:
    """A historical era. Immutable once loaded."""

    id: str
    name: str
    timespan: str
    description: str = ""
    key_events: Tuple[str, ...] = ()
    questions: Tuple[Question, ...] = ()
    cultural_highlights: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )
    figures: Tuple[str, ...] = ()
    artifacts: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict) -> "Era":
        return cls(
            id=data["id"],
            name=data["name"],
            timespan=data.get("timespan", ""),
            description=data.get("description", ""),
            key_events=tuple(data.get("key_events", [])),
            questions=tuple(Question.from_dict(q) for q in data.get("questions", [])),
            cultural_highlights=MappingProxyType(dict(data.get("cultural_highlights", {}))),
            figures=tuple(data.get("figures", [])),
            artifacts=tuple(data.get("artifacts", [])),
        )


# =============================================================================
# CATALOG
# =============================================================================

def load_catalog(raw_eras: Optional[List[Dict]] = None) -> Tuple[Era, ...]:
    """
    Build the ordered, read-only era catalog from a raw table.

    Raises ValueError for duplicate ids or malformed questions.
    """
    raw_eras = ERAS if raw_eras is None else raw_eras
    catalog = tuple(Era.from_dict(data) for data in raw_eras)

    seen = set()
    for era in catalog:
        if era.id in seen:
            raise ValueError(f"Duplicate era id: {era.id}")
        seen.add(era.id)

    return catalog


CATALOG = load_catalog()


def get_era_by_id(era_id, catalog=None):
    """Get a specific era by ID"""
    for era in (CATALOG if catalog is None else catalog):
        if era.id == era_id:
            return era
    return None


def get_era_by_name(name, catalog=None):
    """Get an era by its display name, ignoring case and surrounding spaces"""
    wanted = (name or "").strip().lower()
    for era in (CATALOG if catalog is None else catalog):
        if era.name.lower() == wanted:
            return era
    return None


def get_all_artifacts(catalog=None) -> List[str]:
    """Every artifact across the catalog, in catalog order"""
    artifacts = []
    for era in (CATALOG if catalog is None else catalog):
        artifacts.extend(era.artifacts)
    return artifacts
