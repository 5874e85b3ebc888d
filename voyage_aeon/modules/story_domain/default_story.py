"""Built-in content for the Voyage Aeon adventure."""

from __future__ import annotations

from copy import deepcopy

from voyage_aeon.config import DEFAULT_STORY_ID
from voyage_aeon.modules.story_domain.default_endings import DEFAULT_ENDING_NAMES
from voyage_aeon.modules.story_domain.default_labels import DEFAULT_CHOICE_DESCRIPTIONS, DEFAULT_SCENE_NAMES
from voyage_aeon.modules.story_domain.scene_keys import SceneKey as K
from voyage_aeon.modules.story_domain.scene_keys import table_by_value


def _text(*paragraphs: str) -> str:
    return "\n\n".join(paragraphs)


def _choice(label: str, target: K) -> dict:
    return {"label": label, "next": target.value}


DEFAULT_SCENES: dict[K, dict] = {
    K.START: {
        "text": _text(
            "You're a space explorer who just detected a mysterious signal from deep space. "
            "Your ship's computer shows two options.",
        ),
        "choices": [
            _choice("🚀 Investigate the signal immediately", K.INVESTIGATE),
            _choice("📡 Scan the area first for safety", K.SCAN),
        ],
    },
    K.INVESTIGATE: {
        "text": _text(
            "You fly directly toward the signal and discover a massive alien space station. "
            "It's clearly ancient but still powered.",
        ),
        "choices": [
            _choice("🔍 Board the station", K.BOARD),
            _choice("📞 Try to communicate first", K.COMMUNICATE),
        ],
    },
    K.SCAN: {
        "text": _text(
            "Your scans reveal the signal comes from an advanced alien probe. It seems to be studying your ship.",
        ),
        "choices": [
            _choice("🤝 Send a peaceful greeting", K.PEACEFUL),
            _choice("🛡️ Raise shields defensively", K.DEFENSIVE),
        ],
    },
    K.BOARD: {
        "text": _text(
            "Inside the station, you find living crystal technology that responds to your presence. "
            "The crystals glow brighter as you approach.",
            "As you move deeper, you discover the station is vast - corridors stretch in multiple directions, "
            "each pulsing with different colored lights.",
        ),
        "choices": [
            _choice("🔬 Study the crystal technology", K.CRYSTAL_STUDY),
            _choice("🚶 Explore the blue-lit corridor", K.BLUE_CORRIDOR_EXPLORE),
        ],
    },
    K.CRYSTAL_STUDY: {
        "text": _text(
            "You approach the crystals carefully. As your hand nears them, they emit a harmonic frequency "
            "that resonates through your bones.",
            "The crystals seem to be some form of organic computer, storing vast amounts of data. "
            "You realize they're trying to interface with your mind.",
        ),
        "choices": [
            _choice("🧬 Let the crystals share their knowledge", K.CRYSTAL_TECH_ENDING),
            _choice("🧠 Allow the mental interface", K.CRYSTAL_INTERFACE),
        ],
    },
    K.BLUE_CORRIDOR_EXPLORE: {
        "text": _text(
            "The blue corridor leads to a massive chamber filled with floating holographic displays "
            "showing star maps of unknown galaxies.",
            "In the center stands what appears to be a navigation console, still active after eons. "
            "Ancient symbols scroll across its surface.",
        ),
        "choices": [
            _choice("🗺️ Examine the star maps", K.STAR_MAP_STUDY),
            _choice("⚙️ Interact with the navigation console", K.NAVIGATION_CONSOLE),
        ],
    },
    K.CRYSTAL_INTERFACE: {
        "text": _text(
            "As you allow the mental connection, your consciousness expands beyond your physical form. "
            "You experience memories of the station's creators -",
            "A race called the Zephyrians who transcended physical existence millennia ago. "
            "They left this station as a gift for younger species.",
        ),
        "choices": [
            _choice("🎁 Accept their gift of knowledge", K.ZEPHYRIAN_GIFT),
            _choice("📱 Use your scanner to study them safely", K.CRYSTAL_SCAN),
        ],
    },
    K.CRYSTAL_SCAN: {
        "text": _text(
            "Your scanner reveals the crystals are composed of an unknown element that exists partially "
            "in normal space and partially in subspace.",
            "The readings suggest they can manipulate space-time itself. "
            "This technology could revolutionize human understanding of physics.",
        ),
        "choices": [
            _choice("📊 Download the scan data", K.SCIENTIFIC_DISCOVERY),
            _choice("🔬 Attempt to take a crystal sample", K.CRYSTAL_SAMPLE),
        ],
    },
    K.COMMUNICATE: {
        "text": _text(
            "The station responds! An ancient AI speaks directly into your mind, "
            "offering to share vast knowledge of the galaxy.",
        ),
        "choices": [
            _choice("🎓 Accept the knowledge", K.KNOWLEDGE_ENDING),
            _choice("🤔 Ask about their civilization first", K.CIVILIZATION_ENDING),
        ],
    },
    K.PEACEFUL: {
        "text": _text(
            "The probe responds positively to your greeting and projects a holographic star map "
            "showing locations of other ancient sites.",
            "The probe's AI speaks in harmonious tones: \"We are pleased by your peaceful approach. "
            "We offer you a choice of gifts.\"",
        ),
        "choices": [
            _choice("📍 Ask for coordinates to explore", K.COORDINATE_GIFT),
            _choice("🤖 Request to meet their creators", K.CREATOR_MEETING),
        ],
    },
    K.COORDINATE_GIFT: {
        "text": _text(
            "The probe downloads a comprehensive star map into your ship's navigation system. "
            "The map reveals dozens of ancient sites scattered across the galaxy.",
            "Each site pulses with different colors, indicating various types of technology "
            "and knowledge waiting to be discovered.",
        ),
        "choices": [
            _choice("🌌 Choose the nearest ancient library", K.ANCIENT_LIBRARY),
            _choice("⚡ Head to an energy research station", K.ENERGY_STATION),
        ],
    },
    K.CREATOR_MEETING: {
        "text": _text(
            "The probe's hologram shifts, revealing the image of a graceful, ethereal being "
            "with luminous skin and eyes like stars.",
            "\"I am Lyra, last guardian of the Celestial Archive. "
            "We have waited eons for a species ready for our knowledge.\"",
        ),
        "choices": [
            _choice("🎓 Ask about the Celestial Archive", K.CELESTIAL_ARCHIVE),
            _choice("🤝 Offer human knowledge in exchange", K.KNOWLEDGE_EXCHANGE),
        ],
    },
    K.DEFENSIVE: {
        "text": _text(
            "Your defensive posture impresses the probe. It recognizes you as a cautious but intelligent species.",
            "The probe transmits: \"Your caution shows wisdom. We respect those who protect themselves "
            "while remaining open to learning.\"",
        ),
        "choices": [
            _choice("🛡️ Maintain defensive stance", K.DEFENSIVE_PROTOCOL),
            _choice("🔄 Lower shields to show trust", K.TRUST_BUILDING),
        ],
    },
    K.DEFENSIVE_PROTOCOL: {
        "text": _text(
            "You maintain your shields while engaging in careful dialogue. "
            "The probe appreciates your measured approach.",
            "It begins sharing defensive technologies and tactical knowledge, "
            "recognizing you as a potential guardian species.",
        ),
        "choices": [
            _choice("⚔️ Accept guardian training", K.GUARDIAN_TRAINING),
            _choice("🔍 Study their defensive technology", K.DEFENSIVE_TECH),
        ],
    },
    K.TRUST_BUILDING: {
        "text": _text(
            "As you lower your shields, the probe's energy signature shifts to a warmer, more welcoming frequency.",
            "\"Trust is the foundation of all galactic cooperation. "
            "We offer you membership in the Galactic Peacekeepers.\"",
        ),
        "choices": [
            _choice("🌟 Accept membership", K.PEACEKEEPER_MEMBERSHIP),
            _choice("📚 Learn about the organization first", K.PEACEKEEPER_INFO),
        ],
    },
    K.CRYSTAL_TECH_ENDING: {
        "text": _text(
            "As you study the living crystals, they respond to your presence, sharing their knowledge directly "
            "with your mind. You learn that they are a symbiotic species that merged with technology eons ago.",
            "They offer to enhance your ship with their bio-tech, creating a vessel that can traverse dimensions "
            "and communicate with any form of consciousness in the universe. "
            "You have become the first human ambassador to the crystal collective!",
        ),
        "choices": [],
    },
    K.KNOWLEDGE_ENDING: {
        "text": _text(
            "The ancient AI downloads vast libraries of knowledge into your ship's computers - star maps of "
            "unexplored galaxies, technologies beyond current understanding, and the locations of other ancient "
            "civilizations waiting to be discovered.",
            "You return to human space not just as an explorer, but as a bridge between species. "
            "Your mission has evolved from simple exploration to galactic diplomacy!",
        ),
        "choices": [],
    },
    K.CONSCIOUSNESS_ENDING: {
        "text": _text(
            "You allow the ancient consciousness technology to interface with your mind. The experience is "
            "overwhelming - you see the universe through the eyes of a million different species, "
            "understand the true nature of space and time.",
            "When the connection ends, you retain a fragment of this cosmic awareness. You have transcended your "
            "human limitations and become something new - a cosmic consciousness capable of guiding humanity "
            "to its next evolutionary step!",
        ),
        "choices": [],
    },
    K.STAR_MAP_STUDY: {
        "text": _text(
            "The holographic star maps reveal the locations of twelve ancient civilizations, "
            "each with unique technologies and wisdom.",
            "You realize you've discovered a galactic network of knowledge that could advance human civilization "
            "by millennia. You have become the first human Galactic Cartographer!",
        ),
        "choices": [],
    },
    K.NAVIGATION_CONSOLE: {
        "text": _text(
            "As you interact with the navigation console, it activates a hidden function - "
            "a galactic transportation network.",
            "The station itself begins to move, carrying you to the center of the galaxy where the Council of "
            "Ancients awaits. You have become humanity's first Galactic Navigator!",
        ),
        "choices": [],
    },
    K.ZEPHYRIAN_GIFT: {
        "text": _text(
            "The Zephyrians bestow upon you their greatest gift - the ability to perceive and manipulate "
            "the quantum threads that connect all consciousness.",
            "You return to human space with powers beyond imagination, "
            "becoming the first human Quantum Consciousness Weaver!",
        ),
        "choices": [],
    },
    K.STATION_NETWORK: {
        "text": _text(
            "The crystal interface reveals a vast network of similar stations throughout the galaxy, "
            "each containing different aspects of Zephyrian knowledge.",
            "You are granted access to the entire network, becoming the Guardian of the Zephyrian Legacy!",
        ),
        "choices": [],
    },
    K.SCIENTIFIC_DISCOVERY: {
        "text": _text(
            "Your scientific analysis of the crystal technology leads to breakthrough discoveries in physics, "
            "consciousness, and space-time manipulation.",
            "You return to human space as the greatest scientific mind of your generation, "
            "ushering in a new age of human advancement!",
        ),
        "choices": [],
    },
    K.CRYSTAL_SAMPLE: {
        "text": _text(
            "As you carefully extract a crystal sample, it bonds with your ship's systems, "
            "creating a hybrid bio-technological vessel.",
            "Your ship becomes a living entity capable of traveling between dimensions. "
            "You have become the first Bio-Ship Pioneer!",
        ),
        "choices": [],
    },
    K.ANCIENT_LIBRARY: {
        "text": _text(
            "The ancient library contains the collected knowledge of a thousand civilizations "
            "spanning millions of years.",
            "You spend months absorbing this wisdom, returning to human space as the Keeper of Galactic Knowledge!",
        ),
        "choices": [],
    },
    K.ENERGY_STATION: {
        "text": _text(
            "The energy research station teaches you to harness the fundamental forces of the universe itself.",
            "You master technologies that can power entire star systems, "
            "becoming humanity's first Cosmic Energy Engineer!",
        ),
        "choices": [],
    },
    K.CELESTIAL_ARCHIVE: {
        "text": _text(
            "Lyra guides you through the Celestial Archive, a repository of the universe's most profound "
            "secrets and beautiful art.",
            "You become the first human inducted as a Celestial Archivist, guardian of cosmic beauty and wisdom!",
        ),
        "choices": [],
    },
    K.KNOWLEDGE_EXCHANGE: {
        "text": _text(
            "Your offer to share human knowledge delights Lyra. "
            "The cultural exchange that follows enriches both species immeasurably.",
            "You establish the first Human-Celestial Embassy, becoming the Galactic Cultural Ambassador!",
        ),
        "choices": [],
    },
    K.GUARDIAN_TRAINING: {
        "text": _text(
            "You undergo intensive training in advanced defensive technologies "
            "and galactic peacekeeping protocols.",
            "You emerge as the first human Galactic Guardian, protector of peaceful species throughout the galaxy!",
        ),
        "choices": [],
    },
    K.DEFENSIVE_TECH: {
        "text": _text(
            "You master defensive technologies beyond human imagination - shields that can protect entire "
            "planets and weapons that disable rather than destroy.",
            "You return as humanity's first Defensive Technology Specialist, "
            "ensuring Earth's protection for millennia!",
        ),
        "choices": [],
    },
    K.PEACEKEEPER_MEMBERSHIP: {
        "text": _text(
            "You are formally inducted into the Galactic Peacekeepers, an ancient organization dedicated "
            "to maintaining harmony across the stars.",
            "You become the first human Galactic Peacekeeper, with authority to mediate conflicts across the galaxy!",
        ),
        "choices": [],
    },
    K.PEACEKEEPER_INFO: {
        "text": _text(
            "You learn about the Galactic Peacekeepers' noble mission to maintain balance "
            "and prevent conflicts between species.",
            "Impressed by their wisdom, you accept a role as their first human liaison, "
            "becoming the Interspecies Diplomatic Coordinator!",
        ),
        "choices": [],
    },
    K.CIVILIZATION_ENDING: {
        "text": _text(
            "The ancient AI shares the fascinating history of their civilization - "
            "the Ethereal Architects who built this station eons ago.",
            "They were a peaceful species who transcended physical form to become pure consciousness, leaving "
            "behind these stations as gifts for younger civilizations. You learn about their philosophy, "
            "their technology, and their hope for the future of the galaxy.",
            "You have become the first human Civilization Historian, keeper of ancient wisdom and cultural knowledge!",
        ),
        "choices": [],
    },
}


def build_default_story_pack() -> dict:
    return {
        "story_id": DEFAULT_STORY_ID,
        "title": "Voyage Aeon",
        "start_scene": K.START.value,
        "scenes": {key.value: deepcopy(scene) for key, scene in DEFAULT_SCENES.items()},
        "scene_names": table_by_value(DEFAULT_SCENE_NAMES),
        "ending_names": table_by_value(DEFAULT_ENDING_NAMES),
        "choice_descriptions": table_by_value(DEFAULT_CHOICE_DESCRIPTIONS),
    }
