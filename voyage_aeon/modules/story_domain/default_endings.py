from __future__ import annotations

from voyage_aeon.modules.story_domain.scene_keys import SceneKey

UNKNOWN_ENDING_NAME = "Unknown Ending"
TERMINATED_ENDING_NAME = "Mission Terminated by User"

DEFAULT_ENDING_NAMES: dict[SceneKey, str] = {
    SceneKey.CRYSTAL_TECH_ENDING: "Bio-Tech Symbiosis Pioneer",
    SceneKey.KNOWLEDGE_ENDING: "Galactic Knowledge Keeper",
    SceneKey.CONSCIOUSNESS_ENDING: "Cosmic Consciousness Transcendent",
    SceneKey.CIVILIZATION_ENDING: "Civilization Historian",
    SceneKey.STAR_MAP_STUDY: "Galactic Cartographer",
    SceneKey.NAVIGATION_CONSOLE: "Galactic Navigator",
    SceneKey.ZEPHYRIAN_GIFT: "Quantum Consciousness Weaver",
    SceneKey.STATION_NETWORK: "Guardian of the Zephyrian Legacy",
    SceneKey.SCIENTIFIC_DISCOVERY: "Greatest Scientific Mind",
    SceneKey.CRYSTAL_SAMPLE: "Bio-Ship Pioneer",
    SceneKey.ANCIENT_LIBRARY: "Keeper of Galactic Knowledge",
    SceneKey.ENERGY_STATION: "Cosmic Energy Engineer",
    SceneKey.CELESTIAL_ARCHIVE: "Celestial Archivist",
    SceneKey.KNOWLEDGE_EXCHANGE: "Galactic Cultural Ambassador",
    SceneKey.GUARDIAN_TRAINING: "Galactic Guardian",
    SceneKey.DEFENSIVE_TECH: "Defensive Technology Specialist",
    SceneKey.PEACEKEEPER_MEMBERSHIP: "Galactic Peacekeeper",
    SceneKey.PEACEKEEPER_INFO: "Interspecies Diplomatic Coordinator",
}
