from __future__ import annotations

from enum import Enum


class SceneKey(str, Enum):
    START = "start"
    INVESTIGATE = "investigate"
    SCAN = "scan"
    BOARD = "board"
    COMMUNICATE = "communicate"
    PEACEFUL = "peaceful"
    DEFENSIVE = "defensive"

    CRYSTAL_STUDY = "crystalStudy"
    BLUE_CORRIDOR_EXPLORE = "blueCorridorExplore"
    CRYSTAL_INTERFACE = "crystalInterface"
    CRYSTAL_SCAN = "crystalScan"
    COORDINATE_GIFT = "coordinateGift"
    CREATOR_MEETING = "creatorMeeting"
    DEFENSIVE_PROTOCOL = "defensiveProtocol"
    TRUST_BUILDING = "trustBuilding"

    CRYSTAL_TECH_ENDING = "crystalTechEnding"
    KNOWLEDGE_ENDING = "knowledgeEnding"
    CONSCIOUSNESS_ENDING = "consciousnessEnding"
    CIVILIZATION_ENDING = "civilizationEnding"
    STAR_MAP_STUDY = "starMapStudy"
    NAVIGATION_CONSOLE = "navigationConsole"
    ZEPHYRIAN_GIFT = "zephyrianGift"
    STATION_NETWORK = "stationNetwork"
    SCIENTIFIC_DISCOVERY = "scientificDiscovery"
    CRYSTAL_SAMPLE = "crystalSample"
    ANCIENT_LIBRARY = "ancientLibrary"
    ENERGY_STATION = "energyStation"
    CELESTIAL_ARCHIVE = "celestialArchive"
    KNOWLEDGE_EXCHANGE = "knowledgeExchange"
    GUARDIAN_TRAINING = "guardianTraining"
    DEFENSIVE_TECH = "defensiveTech"
    PEACEKEEPER_MEMBERSHIP = "peacekeeperMembership"
    PEACEKEEPER_INFO = "peacekeeperInfo"


def table_by_value(table: dict[SceneKey, str]) -> dict[str, str]:
    """Flatten an enum-keyed lookup table into the plain string keys a story pack stores."""

    return {key.value: value for key, value in table.items()}
