"""Random event configuration: probability and the fixed event tables.

Each entry is (description, money delta, popularity delta).
"""

EVENT_CHANCE_PERCENT = 20
POSITIVE_EVENT_CHANCE = 0.5

POSITIVE_EVENTS = (
    ("Celebrity visit: popularity increased by 10.", 0, 10),
    ("Sponsor donation: received 500 coins.", 500, 0),
    ("Rare guest: popularity increased by 5.", 0, 5),
    ("Animal protection day: popularity increased by 15.", 0, 15),
    ("Charity fund: received 1000 coins.", 1000, 0),
)

NEGATIVE_EVENTS = (
    ("Animal escape: popularity decreased by 10.", 0, -10),
    ("Water system leak: lost 300 coins.", -300, 0),
    ("Staff conflict: popularity decreased by 5.", 0, -5),
    ("Fire at the zoo: popularity decreased by 15, lost 500 coins.", -500, -15),
    ("Environmental fine: lost 200 coins.", -200, 0),
)
