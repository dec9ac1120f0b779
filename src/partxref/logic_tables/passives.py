"""Logic tables for passive families: capacitors, resistors and ferrite beads.

Weights run 0-10. Roughly: 10 = must match or the part won't work / fit,
7-9 = electrical limits, 4-6 = secondary performance, 1-3 = logistics.
"""

# =============================================================================
# CERAMIC & MICA CAPACITORS
# =============================================================================

MLCC = {
    "family_id": "12",
    "family_name": "MLCC Capacitors",
    "category": "Passives",
    "description": "Multilayer ceramic chip capacitors",
    "rules": [
        {
            "attribute_id": "capacitance",
            "attribute_name": "Capacitance",
            "logic_type": "identity",
            "weight": 10,
            "engineering_reason": "Nominal capacitance must match. Filter corners, timing and decoupling all depend on it.",
            "sort_order": 1,
        },
        {
            "attribute_id": "package_case",
            "attribute_name": "Package / Case",
            "logic_type": "identity",
            "weight": 10,
            "engineering_reason": "0402, 0603, 0805 etc. have different land patterns and are not interchangeable without a board change.",
            "sort_order": 2,
        },
        {
            "attribute_id": "voltage_rated",
            "attribute_name": "Voltage Rating",
            "logic_type": "threshold",
            "threshold_direction": "gte",
            "weight": 9,
            "engineering_reason": "Replacement must be rated for at least the original working voltage.",
            "sort_order": 3,
        },
        {
            "attribute_id": "dielectric",
            "attribute_name": "Dielectric / Temp Characteristic",
            "logic_type": "identity_upgrade",
            "upgrade_hierarchy": ["Y5V", "Z5U", "X5R", "X6S", "X7R", "X8R", "C0G"],
            "weight": 8,
            "engineering_reason": "A more stable dielectric is acceptable (X5R -> X7R -> C0G), a less stable one is not.",
            "sort_order": 4,
        },
        {
            "attribute_id": "tolerance",
            "attribute_name": "Tolerance",
            "logic_type": "threshold",
            "threshold_direction": "lte",
            "weight": 7,
            "engineering_reason": "Tighter tolerance is always acceptable.",
            "sort_order": 5,
        },
        {
            "attribute_id": "dc_bias_derating",
            "attribute_name": "DC Bias Derating",
            "logic_type": "application_review",
            "weight": 7,
            "engineering_reason": "Class II dielectrics lose capacitance under DC bias and the curves differ by manufacturer. Compare datasheet curves at the operating voltage.",
            "sort_order": 6,
        },
        {
            "attribute_id": "operating_temp",
            "attribute_name": "Operating Temp Range",
            "logic_type": "threshold",
            "threshold_direction": "range_superset",
            "weight": 7,
            "engineering_reason": "Replacement must cover the full operating temperature range of the original.",
            "sort_order": 7,
        },
        {
            "attribute_id": "height",
            "attribute_name": "Height (Seated Max)",
            "logic_type": "fit",
            "weight": 5,
            "engineering_reason": "Taller parts may not clear shields or stacked boards.",
            "sort_order": 8,
        },
        {
            "attribute_id": "esr",
            "attribute_name": "ESR",
            "logic_type": "threshold",
            "threshold_direction": "lte",
            "weight": 4,
            "engineering_reason": "Lower ESR is better for decoupling and ripple current.",
            "sort_order": 9,
        },
        {
            "attribute_id": "esl",
            "attribute_name": "ESL",
            "logic_type": "threshold",
            "threshold_direction": "lte",
            "weight": 3,
            "engineering_reason": "Lower ESL extends the useful decoupling bandwidth.",
            "sort_order": 10,
        },
        {
            "attribute_id": "flexible_termination",
            "attribute_name": "Flexible Termination",
            "logic_type": "identity_flag",
            "weight": 6,
            "engineering_reason": "Soft terminations resist flex cracking. If the original has them, the replacement must too.",
            "sort_order": 11,
        },
        {
            "attribute_id": "piezoelectric_noise",
            "attribute_name": "Piezoelectric Noise (Singing)",
            "logic_type": "application_review",
            "weight": 4,
            "engineering_reason": "Class II parts can sing in audio-band ripple. Check if the circuit is noise sensitive.",
            "sort_order": 12,
        },
        {
            "attribute_id": "msl",
            "attribute_name": "Moisture Sensitivity Level",
            "logic_type": "threshold",
            "threshold_direction": "lte",
            "weight": 3,
            "engineering_reason": "Lower MSL is less restrictive for storage and reflow.",
            "sort_order": 13,
        },
        {
            "attribute_id": "aec_q200",
            "attribute_name": "AEC-Q200",
            "logic_type": "identity_flag",
            "weight": 8,
            "engineering_reason": "Required for automotive. A non-qualified part cannot replace a qualified one.",
            "sort_order": 14,
        },
        {
            "attribute_id": "packaging",
            "attribute_name": "Packaging",
            "logic_type": "operational",
            "weight": 2,
            "engineering_reason": "Tape & reel format must suit the assembly line.",
            "sort_order": 15,
        },
    ],
}

MICA_DELTA = {
    "base_family_id": "12",
    "family_id": "13",
    "family_name": "Mica Capacitors (Silver Mica)",
    "category": "Passives",
    "description": "Derived from MLCC for precision silver mica capacitors",
    "remove": ["dc_bias_derating", "flexible_termination", "piezoelectric_noise"],
    "override": [
        {
            "attribute_id": "dielectric",
            "attribute_name": "Dielectric Material",
            "logic_type": "identity",
            "engineering_reason": "Silver mica is its own material class. No ceramic hierarchy applies.",
        },
        {
            "attribute_id": "tolerance",
            "engineering_reason": "Mica is chosen for precision (typically <= 1%). Tighter is always acceptable.",
        },
    ],
    "add": [
        {
            "attribute_id": "temperature_coefficient",
            "attribute_name": "Temperature Coefficient",
            "logic_type": "threshold",
            "threshold_direction": "lte",
            "weight": 7,
            "engineering_reason": "Low tempco is the main reason to use mica. Lower is better.",
            "sort_order": 16,
        },
    ],
}

MLCC_CONTEXT = {
    "family_ids": ["12"],
    "context_sensitivity": "high",
    "questions": [
        {
            "question_id": "voltage_ratio",
            "question_text": "What is the operating voltage relative to the rated voltage?",
            "priority": 1,
            "options": [
                {
                    "value": "low",
                    "label": "< 50% of rated",
                    "attribute_effects": [
                        {"attribute_id": "dc_bias_derating", "effect": "add_review_flag",
                         "note": "DC bias loss is minor at low voltage ratio but still worth checking for X5R/X7R"},
                    ],
                },
                {
                    "value": "medium",
                    "label": "50-80% of rated",
                    "attribute_effects": [
                        {"attribute_id": "dc_bias_derating", "effect": "escalate_to_primary",
                         "note": "Class II parts can lose 30-60% of capacitance here; compare DC bias curves"},
                        {"attribute_id": "dielectric", "effect": "escalate_to_primary",
                         "note": "Dielectric choice matters at this voltage ratio; C0G has no DC bias loss"},
                    ],
                },
                {
                    "value": "high",
                    "label": "> 80% of rated",
                    "attribute_effects": [
                        {"attribute_id": "dc_bias_derating", "effect": "escalate_to_mandatory",
                         "note": "Effective capacitance of Class II parts may drop below 30% of nominal"},
                        {"attribute_id": "dielectric", "effect": "escalate_to_mandatory",
                         "note": "Only C0G/NP0 holds its capacitance above 80% of rated voltage"},
                    ],
                },
            ],
        },
        {
            "question_id": "flex_pcb",
            "question_text": "Is this mounted on a flex or flex-rigid PCB?",
            "priority": 2,
            "options": [
                {
                    "value": "yes",
                    "label": "Yes, flex or flex-rigid",
                    "attribute_effects": [
                        {"attribute_id": "flexible_termination", "effect": "escalate_to_mandatory",
                         "note": "Standard terminations crack under board flex"},
                    ],
                },
                {"value": "no", "label": "No, rigid PCB"},
            ],
        },
        {
            "question_id": "audio_path",
            "question_text": "Is this in an audio or analog signal path?",
            "priority": 3,
            "options": [
                {
                    "value": "yes",
                    "label": "Yes, audio / analog",
                    "attribute_effects": [
                        {"attribute_id": "dielectric", "effect": "escalate_to_primary",
                         "note": "C0G/NP0 preferred in audio paths"},
                        {"attribute_id": "piezoelectric_noise", "effect": "escalate_to_primary",
                         "note": "Singing capacitors are audible in analog paths"},
                    ],
                },
                {"value": "no", "label": "No"},
            ],
        },
        {
            "question_id": "environment",
            "question_text": "What environment is this for?",
            "priority": 4,
            "options": [
                {
                    "value": "automotive",
                    "label": "Automotive",
                    "attribute_effects": [
                        {"attribute_id": "aec_q200", "effect": "escalate_to_mandatory",
                         "note": "Automotive application requires AEC-Q200"},
                    ],
                },
                {
                    "value": "industrial",
                    "label": "Industrial / harsh",
                    "attribute_effects": [
                        {"attribute_id": "operating_temp", "effect": "escalate_to_primary",
                         "note": "Verify extended temperature range coverage"},
                    ],
                },
                {"value": "consumer", "label": "Consumer"},
            ],
        },
    ],
}


# =============================================================================
# RESISTORS
# =============================================================================

CHIP_RESISTORS = {
    "family_id": "52",
    "family_name": "Chip Resistors",
    "category": "Passives",
    "description": "Surface mount thick and thin film chip resistors",
    "rules": [
        {
            "attribute_id": "resistance",
            "attribute_name": "Resistance",
            "logic_type": "identity",
            "weight": 10,
            "engineering_reason": "Resistance must match exactly. Normalize E-series notation before comparing.",
            "sort_order": 1,
        },
        {
            "attribute_id": "package_case",
            "attribute_name": "Package / Case",
            "logic_type": "identity",
            "weight": 10,
            "engineering_reason": "Chip sizes have different pad geometries and are not interchangeable.",
            "sort_order": 2,
        },
        {
            "attribute_id": "tolerance",
            "attribute_name": "Tolerance",
            "logic_type": "threshold",
            "threshold_direction": "lte",
            "weight": 7,
            "engineering_reason": "Tighter tolerance is always acceptable: ±1% can replace ±5%, not the reverse.",
            "sort_order": 3,
        },
        {
            "attribute_id": "power_rating",
            "attribute_name": "Power Rating",
            "logic_type": "threshold",
            "threshold_direction": "gte",
            "weight": 9,
            "engineering_reason": "Replacement must dissipate at least the same power.",
            "sort_order": 4,
        },
        {
            "attribute_id": "voltage_rated",
            "attribute_name": "Voltage Rating",
            "logic_type": "threshold",
            "threshold_direction": "gte",
            "weight": 8,
            "engineering_reason": "Replacement must handle at least the same working voltage.",
            "sort_order": 5,
        },
        {
            "attribute_id": "tcr",
            "attribute_name": "Temperature Coefficient (TCR)",
            "logic_type": "threshold",
            "threshold_direction": "lte",
            "weight": 6,
            "engineering_reason": "Lower TCR is more stable over temperature. Matters in precision analog.",
            "sort_order": 6,
        },
        {
            "attribute_id": "composition",
            "attribute_name": "Composition",
            "logic_type": "identity_upgrade",
            "upgrade_hierarchy": ["Thick Film", "Thin Film"],
            "weight": 5,
            "engineering_reason": "Thin film has lower noise and tighter TCR. Thick to thin is an upgrade.",
            "sort_order": 7,
        },
        {
            "attribute_id": "operating_temp",
            "attribute_name": "Operating Temp Range",
            "logic_type": "threshold",
            "threshold_direction": "range_superset",
            "weight": 7,
            "engineering_reason": "Replacement must cover the full operating temperature range of the original.",
            "sort_order": 8,
        },
        {
            "attribute_id": "height",
            "attribute_name": "Height (Seated Max)",
            "logic_type": "fit",
            "weight": 5,
            "engineering_reason": "A taller part may not fit tight enclosures or stacked boards.",
            "sort_order": 9,
        },
        {
            "attribute_id": "msl",
            "attribute_name": "Moisture Sensitivity Level",
            "logic_type": "threshold",
            "threshold_direction": "lte",
            "weight": 3,
            "engineering_reason": "MSL 1 (unlimited floor life) is best.",
            "sort_order": 10,
        },
        {
            "attribute_id": "aec_q200",
            "attribute_name": "AEC-Q200",
            "logic_type": "identity_flag",
            "weight": 8,
            "engineering_reason": "Required for automotive. A non-qualified part cannot replace a qualified one.",
            "sort_order": 11,
        },
        {
            "attribute_id": "anti_sulfur",
            "attribute_name": "Anti-Sulfur",
            "logic_type": "identity_flag",
            "weight": 7,
            "engineering_reason": "Sulfur-resistant electrodes prevent open-circuit failures in harsh environments.",
            "sort_order": 12,
        },
        {
            "attribute_id": "packaging",
            "attribute_name": "Packaging",
            "logic_type": "operational",
            "weight": 2,
            "engineering_reason": "Reel width and pitch must match feeder specs.",
            "sort_order": 13,
        },
    ],
}

THROUGH_HOLE_RESISTORS_DELTA = {
    "base_family_id": "52",
    "family_id": "53",
    "family_name": "Through-Hole Resistors",
    "category": "Passives",
    "description": "Derived from chip resistors with through-hole mounting additions",
    "add": [
        {
            "attribute_id": "lead_spacing",
            "attribute_name": "Lead Spacing / Pitch",
            "logic_type": "identity",
            "weight": 7,
            "engineering_reason": "Lead pitch must match the existing hole pattern.",
            "sort_order": 14,
        },
        {
            "attribute_id": "mounting_style",
            "attribute_name": "Mounting Style",
            "logic_type": "identity",
            "weight": 9,
            "engineering_reason": "Axial and radial parts are not interchangeable on the same footprint.",
            "sort_order": 15,
        },
        {
            "attribute_id": "body_dimensions",
            "attribute_name": "Body Length × Diameter",
            "logic_type": "fit",
            "weight": 5,
            "engineering_reason": "A larger body may collide with neighbouring parts.",
            "sort_order": 16,
        },
    ],
}

CURRENT_SENSE_RESISTORS_DELTA = {
    "base_family_id": "52",
    "family_id": "54",
    "family_name": "Current Sense Resistors",
    "category": "Passives",
    "description": "Derived from chip resistors with tightened precision and current-sensing additions",
    "override": [
        {
            "attribute_id": "tolerance",
            "weight": 9,
            "engineering_reason": "Shunt tolerance directly sets current measurement accuracy.",
        },
        {
            "attribute_id": "tcr",
            "weight": 8,
            "engineering_reason": "Shunts self-heat, so TCR drives measurement drift.",
        },
    ],
    "add": [
        {
            "attribute_id": "kelvin_sensing",
            "attribute_name": "Kelvin (4-Terminal) Sensing",
            "logic_type": "identity_flag",
            "weight": 8,
            "engineering_reason": "A 4-terminal layout cannot be replaced by a 2-terminal part.",
            "sort_order": 14,
        },
        {
            "attribute_id": "power_rating_pulse",
            "attribute_name": "Power Rating (Pulse)",
            "logic_type": "threshold",
            "threshold_direction": "gte",
            "weight": 7,
            "engineering_reason": "Must survive the same fault or inrush pulses.",
            "sort_order": 15,
        },
        {
            "attribute_id": "parasitic_inductance",
            "attribute_name": "Inductance (Parasitic)",
            "logic_type": "application_review",
            "weight": 5,
            "engineering_reason": "Parasitic inductance distorts fast current edges. Check against the sensing bandwidth.",
            "sort_order": 16,
        },
    ],
}

CHASSIS_MOUNT_RESISTORS_DELTA = {
    "base_family_id": "52",
    "family_id": "55",
    "family_name": "Chassis Mount / High Power Resistors",
    "category": "Passives",
    "description": "Derived from chip resistors with high-power mounting and thermal additions",
    "override": [
        {
            "attribute_id": "power_rating",
            "weight": 10,
            "engineering_reason": "Power rating at the specified case temperature is the core of the thermal design.",
        },
    ],
    "add": [
        {
            "attribute_id": "mounting_style",
            "attribute_name": "Mounting Style",
            "logic_type": "identity",
            "weight": 9,
            "engineering_reason": "TO-220, TO-247, D²PAK, bolt-down or clip mount must match.",
            "sort_order": 14,
        },
        {
            "attribute_id": "thermal_resistance",
            "attribute_name": "Thermal Resistance (°C/W)",
            "logic_type": "threshold",
            "threshold_direction": "lte",
            "weight": 7,
            "engineering_reason": "Lower thermal resistance moves heat to the heatsink better.",
            "sort_order": 15,
        },
        {
            "attribute_id": "heatsink_dimensions",
            "attribute_name": "Heatsink Interface Dimensions",
            "logic_type": "fit",
            "weight": 8,
            "engineering_reason": "Bolt hole spacing and tab size must fit the existing hardware.",
            "sort_order": 16,
        },
    ],
}

CHIP_RESISTORS_CONTEXT = {
    "family_ids": ["52"],
    "context_sensitivity": "low",
    "questions": [
        {
            "question_id": "precision",
            "question_text": "Is this a precision or instrumentation application?",
            "priority": 1,
            "options": [
                {
                    "value": "yes",
                    "label": "Yes, precision / instrumentation",
                    "attribute_effects": [
                        {"attribute_id": "tolerance", "effect": "escalate_to_primary",
                         "note": "Precision application needs tight tolerance matching"},
                        {"attribute_id": "tcr", "effect": "escalate_to_primary",
                         "note": "Low TCR keeps measurements stable"},
                        {"attribute_id": "composition", "effect": "escalate_to_primary",
                         "note": "Thin film preferred for TCR and tolerance"},
                    ],
                },
                {"value": "no", "label": "No, general purpose"},
            ],
        },
        {
            "question_id": "environment",
            "question_text": "What environment is this for?",
            "priority": 2,
            "options": [
                {
                    "value": "automotive",
                    "label": "Automotive",
                    "attribute_effects": [
                        {"attribute_id": "aec_q200", "effect": "escalate_to_mandatory",
                         "note": "Automotive application requires AEC-Q200"},
                    ],
                },
                {
                    "value": "industrial_sulfur",
                    "label": "Industrial with sulfur exposure",
                    "attribute_effects": [
                        {"attribute_id": "anti_sulfur", "effect": "escalate_to_mandatory",
                         "note": "Sulfur exposure needs anti-sulfur terminations"},
                    ],
                },
                {"value": "standard", "label": "Standard / consumer"},
            ],
        },
    ],
}


# =============================================================================
# FERRITE BEADS
# =============================================================================

FERRITE_BEADS = {
    "family_id": "70",
    "family_name": "Ferrite Beads (Surface Mount)",
    "category": "Passives",
    "description": "Surface mount ferrite beads for EMI suppression",
    "rules": [
        {
            "attribute_id": "impedance_100mhz",
            "attribute_name": "Impedance @ 100MHz",
            "logic_type": "identity",
            "weight": 10,
            "engineering_reason": "The 100 MHz impedance is the datasheet figure beads are specified by.",
            "sort_order": 1,
        },
        {
            "attribute_id": "impedance_curve",
            "attribute_name": "Impedance vs Frequency Curve",
            "logic_type": "application_review",
            "weight": 8,
            "engineering_reason": "Beads with the same 100 MHz figure can behave very differently elsewhere.",
            "sort_order": 2,
        },
        {
            "attribute_id": "package_case",
            "attribute_name": "Package / Case",
            "logic_type": "identity",
            "weight": 10,
            "engineering_reason": "Footprint must match.",
            "sort_order": 3,
        },
        {
            "attribute_id": "rated_current",
            "attribute_name": "Rated Current",
            "logic_type": "threshold",
            "threshold_direction": "gte",
            "weight": 9,
            "engineering_reason": "Must carry at least the original current without saturating.",
            "sort_order": 4,
        },
        {
            "attribute_id": "dcr",
            "attribute_name": "DC Resistance (DCR)",
            "logic_type": "threshold",
            "threshold_direction": "lte",
            "weight": 7,
            "engineering_reason": "Higher DCR drops more voltage on the rail.",
            "sort_order": 5,
        },
        {
            "attribute_id": "number_of_lines",
            "attribute_name": "Number of Lines",
            "logic_type": "identity",
            "weight": 6,
            "engineering_reason": "Array beads must have the same line count.",
            "sort_order": 6,
        },
        {
            "attribute_id": "resistance_type",
            "attribute_name": "Resistance Type",
            "logic_type": "identity",
            "weight": 4,
            "engineering_reason": "Signal and power bead types are tuned differently.",
            "sort_order": 7,
        },
        {
            "attribute_id": "tolerance",
            "attribute_name": "Tolerance",
            "logic_type": "threshold",
            "threshold_direction": "lte",
            "weight": 5,
            "engineering_reason": "Tighter impedance tolerance is acceptable.",
            "sort_order": 8,
        },
        {
            "attribute_id": "operating_temp",
            "attribute_name": "Operating Temp Range",
            "logic_type": "threshold",
            "threshold_direction": "range_superset",
            "weight": 6,
            "engineering_reason": "Must cover the original temperature range.",
            "sort_order": 9,
        },
        {
            "attribute_id": "height",
            "attribute_name": "Height (Seated Max)",
            "logic_type": "fit",
            "weight": 5,
            "engineering_reason": "Must not exceed the original height.",
            "sort_order": 10,
        },
        {
            "attribute_id": "voltage_rated",
            "attribute_name": "Voltage Rating",
            "logic_type": "threshold",
            "threshold_direction": "gte",
            "weight": 5,
            "engineering_reason": "Must be rated for at least the rail voltage.",
            "sort_order": 11,
        },
        {
            "attribute_id": "signal_integrity",
            "attribute_name": "Signal Integrity (S-Parameters)",
            "logic_type": "application_review",
            "weight": 7,
            "engineering_reason": "On signal lines the bead must stay transparent at the signal frequency.",
            "sort_order": 12,
        },
        {
            "attribute_id": "aec_q200",
            "attribute_name": "AEC-Q200 Qualification",
            "logic_type": "identity_flag",
            "weight": 8,
            "engineering_reason": "Required for automotive.",
            "sort_order": 13,
        },
        {
            "attribute_id": "packaging",
            "attribute_name": "Packaging",
            "logic_type": "operational",
            "weight": 2,
            "engineering_reason": "Tape & reel format must suit the assembly line.",
            "sort_order": 14,
        },
    ],
}

FERRITE_BEADS_CONTEXT = {
    "family_ids": ["70"],
    "context_sensitivity": "high",
    "questions": [
        {
            "question_id": "signal_or_power",
            "question_text": "Is this ferrite bead on a power rail or a signal line?",
            "priority": 1,
            "options": [
                {
                    "value": "power",
                    "label": "Power rail",
                    "attribute_effects": [
                        {"attribute_id": "rated_current", "effect": "escalate_to_primary",
                         "note": "Rated current must exceed peak load current with margin"},
                        {"attribute_id": "dcr", "effect": "escalate_to_primary",
                         "note": "DCR drops voltage on the supply rail"},
                        {"attribute_id": "signal_integrity", "effect": "not_applicable",
                         "note": "Signal integrity does not apply to rail filtering"},
                    ],
                },
                {
                    "value": "signal",
                    "label": "Signal line",
                    "attribute_effects": [
                        {"attribute_id": "signal_integrity", "effect": "escalate_to_primary",
                         "note": "Bead must be transparent at the signal frequency"},
                        {"attribute_id": "dcr", "effect": "not_applicable",
                         "note": "DCR matters little with low DC current"},
                    ],
                },
            ],
        },
        {
            "question_id": "operating_current",
            "question_text": "What is the actual DC operating current (peak)?",
            "priority": 2,
            "options": [
                {
                    "value": "unknown",
                    "label": "Unknown / varies",
                    "attribute_effects": [
                        {"attribute_id": "impedance_100mhz", "effect": "add_review_flag",
                         "note": "Check impedance at operating current on the DC bias curve"},
                    ],
                },
                {"value": "known", "label": "Known and below rated current"},
            ],
        },
        {
            "question_id": "signal_frequency",
            "question_text": "What is the signal frequency?",
            "priority": 3,
            "condition": {"question_id": "signal_or_power", "values": ["signal"]},
            "options": [
                {
                    "value": "broadband",
                    "label": "Broadband / unknown",
                    "attribute_effects": [
                        {"attribute_id": "impedance_curve", "effect": "add_review_flag",
                         "note": "Curve must pass the signal band and attenuate its harmonics"},
                    ],
                },
                {"value": "narrowband", "label": "Known, narrow band"},
            ],
        },
    ],
}


# =============================================================================
# SUBCATEGORY PATTERNS
# =============================================================================
# Case-insensitive substrings of vendor subcategory labels. Longest match wins.

SUBCATEGORY_PATTERNS: list[tuple[str, str]] = [
    ("MLCC", "12"),
    ("Ceramic", "12"),
    ("Multilayer Ceramic", "12"),
    ("Ceramic Capacitor", "12"),
    ("Mica Capacitor", "13"),
    ("Silver Mica", "13"),
    ("Mica", "13"),
    ("Chip Resistor", "52"),
    ("Thick Film", "52"),
    ("Thin Film", "52"),
    ("Resistor", "52"),
    ("Chip Resistor - Surface Mount", "52"),
    ("Through Hole Resistor", "53"),
    ("Axial Resistor", "53"),
    ("Current Sense Resistor", "54"),
    ("Current Sense", "54"),
    ("Chassis Mount Resistor", "55"),
    ("Power Resistor", "55"),
    ("Ferrite Bead", "70"),
    ("Ferrite", "70"),
    ("Ferrite Bead and Chip", "70"),
]
