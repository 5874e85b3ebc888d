from __future__ import annotations

from voyage_aeon.modules.story_domain.scene_keys import SceneKey

DEFAULT_SCENE_NAMES: dict[SceneKey, str] = {
    SceneKey.START: "Initial Signal Detection",
    SceneKey.INVESTIGATE: "Direct Investigation",
    SceneKey.SCAN: "Cautious Scanning",
    SceneKey.BOARD: "Station Boarding",
    SceneKey.COMMUNICATE: "Communication Attempt",
    SceneKey.PEACEFUL: "Peaceful Contact",
    SceneKey.DEFENSIVE: "Defensive Posture",
    SceneKey.CRYSTAL_STUDY: "Crystal Technology Analysis",
    SceneKey.BLUE_CORRIDOR_EXPLORE: "Blue Corridor Exploration",
    SceneKey.CRYSTAL_INTERFACE: "Crystal Mental Interface",
    SceneKey.CRYSTAL_SCAN: "Crystal Scientific Scanning",
    SceneKey.STAR_MAP_STUDY: "Holographic Star Map Study",
    SceneKey.NAVIGATION_CONSOLE: "Navigation Console Interaction",
    SceneKey.COORDINATE_GIFT: "Coordinate Gift Reception",
    SceneKey.CREATOR_MEETING: "Creator Meeting",
    SceneKey.DEFENSIVE_PROTOCOL: "Defensive Protocol Engagement",
    SceneKey.TRUST_BUILDING: "Trust Building Initiative",
    SceneKey.KNOWLEDGE_ENDING: "Ancient Knowledge Acquisition",
    SceneKey.CIVILIZATION_ENDING: "Civilization Inquiry",
    SceneKey.CRYSTAL_TECH_ENDING: "Living Crystal Study",
    SceneKey.CONSCIOUSNESS_ENDING: "Consciousness Technology",
    SceneKey.ZEPHYRIAN_GIFT: "Zephyrian Gift Acceptance",
    SceneKey.STATION_NETWORK: "Station Network Discovery",
    SceneKey.SCIENTIFIC_DISCOVERY: "Scientific Breakthrough",
    SceneKey.CRYSTAL_SAMPLE: "Crystal Sample Extraction",
    SceneKey.ANCIENT_LIBRARY: "Ancient Library Exploration",
    SceneKey.ENERGY_STATION: "Energy Research Station",
    SceneKey.CELESTIAL_ARCHIVE: "Celestial Archive Access",
    SceneKey.KNOWLEDGE_EXCHANGE: "Knowledge Exchange Initiative",
    SceneKey.GUARDIAN_TRAINING: "Guardian Training Program",
    SceneKey.DEFENSIVE_TECH: "Defensive Technology Study",
    SceneKey.PEACEKEEPER_MEMBERSHIP: "Peacekeeper Membership",
    SceneKey.PEACEKEEPER_INFO: "Peacekeeper Information",
}

# Keyed by the destination scene of the choice.
DEFAULT_CHOICE_DESCRIPTIONS: dict[SceneKey, str] = {
    SceneKey.INVESTIGATE: "Chose immediate action over caution",
    SceneKey.SCAN: "Prioritized safety and analysis",
    SceneKey.BOARD: "Decided to physically explore the station",
    SceneKey.COMMUNICATE: "Attempted diplomatic first contact",
    SceneKey.PEACEFUL: "Extended peaceful greetings",
    SceneKey.DEFENSIVE: "Maintained protective protocols",
    SceneKey.CRYSTAL_STUDY: "Chose to study crystal technology",
    SceneKey.BLUE_CORRIDOR_EXPLORE: "Explored the mysterious blue corridor",
    SceneKey.CRYSTAL_INTERFACE: "Allowed mental interface with crystals",
    SceneKey.CRYSTAL_SCAN: "Used scientific scanning approach",
    SceneKey.STAR_MAP_STUDY: "Examined ancient star maps",
    SceneKey.NAVIGATION_CONSOLE: "Interacted with navigation systems",
    SceneKey.COORDINATE_GIFT: "Accepted coordinate gift",
    SceneKey.CREATOR_MEETING: "Requested to meet the creators",
    SceneKey.DEFENSIVE_PROTOCOL: "Maintained defensive protocols",
    SceneKey.TRUST_BUILDING: "Chose to build trust",
    SceneKey.ZEPHYRIAN_GIFT: "Accepted the Zephyrian gift",
    SceneKey.STATION_NETWORK: "Inquired about station network",
    SceneKey.SCIENTIFIC_DISCOVERY: "Pursued scientific discovery",
    SceneKey.CRYSTAL_SAMPLE: "Attempted to take crystal sample",
    SceneKey.ANCIENT_LIBRARY: "Chose to visit ancient library",
    SceneKey.ENERGY_STATION: "Headed to energy research station",
    SceneKey.CELESTIAL_ARCHIVE: "Asked about Celestial Archive",
    SceneKey.KNOWLEDGE_EXCHANGE: "Offered knowledge exchange",
    SceneKey.GUARDIAN_TRAINING: "Accepted guardian training",
    SceneKey.DEFENSIVE_TECH: "Studied defensive technology",
    SceneKey.PEACEKEEPER_MEMBERSHIP: "Accepted peacekeeper membership",
    SceneKey.PEACEKEEPER_INFO: "Learned about peacekeepers first",
    SceneKey.KNOWLEDGE_ENDING: "Accepted ancient wisdom",
    SceneKey.CIVILIZATION_ENDING: "Sought historical understanding",
    SceneKey.CRYSTAL_TECH_ENDING: "Studied living bio-technology",
    SceneKey.CONSCIOUSNESS_ENDING: "Explored consciousness merger",
}
