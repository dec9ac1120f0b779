"""Logic tables for integrated circuits."""

LDO = {
    "family_id": "C1",
    "family_name": "Linear Voltage Regulators (LDOs)",
    "category": "Integrated Circuits",
    "description": "Fixed and adjustable low-dropout linear regulators",
    "rules": [
        {"attribute_id": "output_type", "attribute_name": "Output Type (Fixed / Adjustable / Tracking / Negative)",
         "logic_type": "identity", "weight": 10, "sort_order": 1,
         "engineering_reason": "A fixed part cannot replace an adjustable one without a feedback network change."},
        {"attribute_id": "output_voltage", "attribute_name": "Output Voltage Vout",
         "logic_type": "identity", "weight": 10, "sort_order": 2,
         "engineering_reason": "Fixed output voltage must match."},
        {"attribute_id": "package_case", "attribute_name": "Package / Footprint",
         "logic_type": "identity", "weight": 10, "sort_order": 3,
         "engineering_reason": "Footprint and pinout must match."},
        {"attribute_id": "polarity", "attribute_name": "Polarity (Positive / Negative)",
         "logic_type": "identity", "weight": 10, "sort_order": 4,
         "engineering_reason": "Positive and negative regulators are not interchangeable."},
        {"attribute_id": "vin_max", "attribute_name": "Maximum Input Voltage (Vin Max)",
         "logic_type": "threshold", "threshold_direction": "gte", "weight": 8, "sort_order": 5,
         "engineering_reason": "Must withstand the highest input voltage."},
        {"attribute_id": "vin_min", "attribute_name": "Minimum Input Voltage (Vin Min / Dropout)",
         "logic_type": "threshold", "threshold_direction": "lte", "weight": 7, "sort_order": 6,
         "engineering_reason": "Must regulate down to the lowest input voltage."},
        {"attribute_id": "iout_max", "attribute_name": "Maximum Output Current (Iout Max)",
         "logic_type": "threshold", "threshold_direction": "gte", "weight": 9, "sort_order": 7,
         "engineering_reason": "Must supply at least the original load current."},
        {"attribute_id": "vdropout", "attribute_name": "Dropout Voltage (Vdropout Max)",
         "logic_type": "threshold", "threshold_direction": "lte", "weight": 7, "sort_order": 8,
         "engineering_reason": "Lower dropout keeps regulation with less headroom."},
        {"attribute_id": "iq", "attribute_name": "Quiescent Current (Iq / Ground Current)",
         "logic_type": "threshold", "threshold_direction": "lte", "weight": 5, "sort_order": 9,
         "engineering_reason": "Lower quiescent current is better for standby budget."},
        {"attribute_id": "vout_accuracy", "attribute_name": "Output Voltage Accuracy (Initial Tolerance)",
         "logic_type": "threshold", "threshold_direction": "lte", "weight": 7, "sort_order": 10,
         "engineering_reason": "Tighter initial accuracy is acceptable."},
        {"attribute_id": "output_cap_compatibility", "attribute_name": "Output Capacitor ESR Compatibility (Ceramic Stable)",
         "logic_type": "identity_flag", "weight": 8, "sort_order": 11,
         "engineering_reason": "Some LDOs oscillate with low-ESR ceramic output capacitors."},
        {"attribute_id": "psrr", "attribute_name": "PSRR (Power Supply Rejection Ratio)",
         "logic_type": "application_review", "weight": 6, "sort_order": 12,
         "engineering_reason": "PSRR must be compared at the ripple frequency of the input."},
        {"attribute_id": "load_regulation", "attribute_name": "Load Regulation (ΔVout / ΔIout)",
         "logic_type": "threshold", "threshold_direction": "lte", "weight": 5, "sort_order": 13,
         "engineering_reason": "Lower is better."},
        {"attribute_id": "line_regulation", "attribute_name": "Line Regulation (ΔVout / ΔVin)",
         "logic_type": "threshold", "threshold_direction": "lte", "weight": 4, "sort_order": 14,
         "engineering_reason": "Lower is better."},
        {"attribute_id": "enable_pin", "attribute_name": "Enable Pin (Active High / Active Low / Absent)",
         "logic_type": "identity", "weight": 8, "sort_order": 15,
         "engineering_reason": "Enable polarity must match the existing control logic."},
        {"attribute_id": "power_good", "attribute_name": "Power-Good / Flag Pin",
         "logic_type": "identity_flag", "weight": 6, "sort_order": 16,
         "engineering_reason": "If the design uses power-good, the replacement must have it."},
        {"attribute_id": "soft_start", "attribute_name": "Soft-Start",
         "logic_type": "identity_flag", "weight": 5, "sort_order": 17,
         "engineering_reason": "Without soft-start, inrush may trip upstream protection."},
        {"attribute_id": "thermal_shutdown", "attribute_name": "Thermal Shutdown",
         "logic_type": "identity_flag", "weight": 6, "sort_order": 18,
         "engineering_reason": "Protection the original had must be kept."},
        {"attribute_id": "rth_ja", "attribute_name": "Thermal Resistance (Rθja / Rθjc)",
         "logic_type": "threshold", "threshold_direction": "lte", "weight": 6, "sort_order": 19,
         "engineering_reason": "Lower thermal resistance runs cooler at the same dissipation."},
        {"attribute_id": "tj_max", "attribute_name": "Maximum Junction Temperature (Tj Max)",
         "logic_type": "threshold", "threshold_direction": "gte", "weight": 7, "sort_order": 20,
         "engineering_reason": "Higher junction temperature rating is acceptable."},
        {"attribute_id": "aec_q100", "attribute_name": "AEC-Q100 Qualification",
         "logic_type": "identity_flag", "weight": 8, "sort_order": 21,
         "engineering_reason": "Required for automotive."},
        {"attribute_id": "packaging", "attribute_name": "Packaging Format (Tape/Reel, Tube, Tray)",
         "logic_type": "operational", "weight": 1, "sort_order": 22,
         "engineering_reason": "Packaging must suit the assembly line."},
    ],
}

LDO_CONTEXT = {
    "family_ids": ["C1"],
    "context_sensitivity": "high",
    "questions": [
        {
            "question_id": "output_cap_type",
            "question_text": "What type of output capacitor is used on the PCB?",
            "priority": 1,
            "options": [
                {
                    "value": "ceramic",
                    "label": "Ceramic (X5R / X7R / X6S / C0G)",
                    "attribute_effects": [
                        {"attribute_id": "output_cap_compatibility", "effect": "escalate_to_mandatory",
                         "block_on_missing": True,
                         "note": "Board uses ceramic output capacitors; replacement must be ceramic-stable"},
                    ],
                },
                {"value": "tantalum", "label": "Tantalum capacitor"},
                {"value": "electrolytic", "label": "Aluminum electrolytic capacitor"},
                {
                    "value": "unknown",
                    "label": "Unknown / not specified",
                    "attribute_effects": [
                        {"attribute_id": "output_cap_compatibility", "effect": "add_review_flag",
                         "note": "Verify stability with the actual output capacitor"},
                    ],
                },
            ],
        },
        {
            "question_id": "battery_application",
            "question_text": "Is this a battery-powered or energy-harvesting application?",
            "priority": 2,
            "options": [
                {
                    "value": "yes",
                    "label": "Yes, battery or energy-harvest powered",
                    "attribute_effects": [
                        {"attribute_id": "iq", "effect": "escalate_to_primary", "block_on_missing": True,
                         "note": "Iq dominates sleep-mode current draw"},
                        {"attribute_id": "vdropout", "effect": "escalate_to_primary",
                         "note": "Lower dropout extends usable battery range"},
                    ],
                },
                {"value": "no", "label": "No, mains-powered or always-on"},
            ],
        },
        {
            "question_id": "noise_sensitive",
            "question_text": "Does the output supply a noise-sensitive analog circuit?",
            "priority": 3,
            "options": [
                {
                    "value": "yes",
                    "label": "Yes, noise-sensitive analog load",
                    "attribute_effects": [
                        {"attribute_id": "psrr", "effect": "escalate_to_primary",
                         "note": "PSRR sets how much input ripple reaches the load"},
                        {"attribute_id": "vout_accuracy", "effect": "escalate_to_primary",
                         "note": "Supply accuracy feeds into ADC/DAC gain error"},
                        {"attribute_id": "load_regulation", "effect": "escalate_to_primary",
                         "note": "Load steps show up as supply variation"},
                    ],
                },
                {"value": "no", "label": "No, digital or non-critical load"},
            ],
        },
        {
            "question_id": "automotive",
            "question_text": "Is this an automotive application?",
            "priority": 4,
            "options": [
                {
                    "value": "yes",
                    "label": "Yes, automotive (AEC-Q100 required)",
                    "attribute_effects": [
                        {"attribute_id": "aec_q100", "effect": "escalate_to_mandatory",
                         "note": "Automotive application requires AEC-Q100"},
                        {"attribute_id": "tj_max", "effect": "escalate_to_primary",
                         "note": "Underhood parts typically need Tj(max) of 150°C"},
                    ],
                },
                {"value": "no", "label": "No"},
            ],
        },
        {
            "question_id": "upstream_switching_freq",
            "question_text": "What is the upstream switching frequency (if post-regulating a switcher)?",
            "priority": 5,
            "condition": {"question_id": "noise_sensitive", "values": ["yes"]},
            "options": [
                {
                    "value": "none_dc",
                    "label": "None, DC supply only",
                    "attribute_effects": [
                        {"attribute_id": "psrr", "effect": "not_applicable",
                         "note": "No switching ripple to reject"},
                    ],
                },
                {
                    "value": "low_freq",
                    "label": "Low (<500kHz)",
                    "attribute_effects": [
                        {"attribute_id": "psrr", "effect": "escalate_to_primary",
                         "note": "Check PSRR at the switching frequency on the datasheet curve"},
                    ],
                },
                {
                    "value": "high_freq",
                    "label": "High (500kHz to 2MHz)",
                    "attribute_effects": [
                        {"attribute_id": "psrr", "effect": "escalate_to_mandatory", "block_on_missing": True,
                         "note": "Most LDOs have little PSRR above 500kHz"},
                    ],
                },
                {"value": "unknown", "label": "Unknown switching frequency"},
            ],
        },
    ],
}

SUBCATEGORY_PATTERNS: list[tuple[str, str]] = [
    ("LDO", "C1"),
    ("Linear Regulator", "C1"),
    ("Linear Voltage Regulator", "C1"),
    ("Voltage Regulators - Linear", "C1"),
    ("Low Dropout", "C1"),
]
