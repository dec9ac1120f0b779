"""Logic tables for discrete semiconductors."""

MOSFETS = {
    "family_id": "B5",
    "family_name": "MOSFETs — N-Channel & P-Channel",
    "category": "Discrete Semiconductors",
    "description": "Power and signal MOSFETs",
    "rules": [
        # Hard constraints: wrong here and the circuit doesn't work at all
        {"attribute_id": "channel_type", "attribute_name": "Channel Type (N-Channel / P-Channel)",
         "logic_type": "identity", "weight": 10, "sort_order": 1,
         "engineering_reason": "N and P channel devices are driven with opposite gate polarity."},
        {"attribute_id": "technology", "attribute_name": "Technology (Si / SiC / GaN)",
         "logic_type": "identity", "weight": 9, "sort_order": 2,
         "engineering_reason": "Si, SiC and GaN need different gate drive voltages."},
        {"attribute_id": "pin_configuration", "attribute_name": "Pin Configuration (G-D-S Order, Tab Assignment)",
         "logic_type": "identity", "weight": 10, "sort_order": 3,
         "engineering_reason": "Same package can have different pin order. A swap shorts the device."},
        {"attribute_id": "package_case", "attribute_name": "Package / Footprint",
         "logic_type": "identity", "weight": 10, "sort_order": 4,
         "engineering_reason": "Footprint must match."},
        {"attribute_id": "aec_q101", "attribute_name": "AEC-Q101 Qualification",
         "logic_type": "identity_flag", "weight": 8, "sort_order": 5,
         "engineering_reason": "Required for automotive."},

        # Ratings
        {"attribute_id": "vds_max", "attribute_name": "Drain-Source Voltage (Vds Max)",
         "logic_type": "threshold", "threshold_direction": "gte", "weight": 10, "sort_order": 6,
         "engineering_reason": "Exceeding Vds destroys the device."},
        {"attribute_id": "vgs_max", "attribute_name": "Gate-Source Voltage (Vgs Max)",
         "logic_type": "threshold", "threshold_direction": "gte", "weight": 8, "sort_order": 7,
         "engineering_reason": "Gate oxide must withstand the drive voltage."},
        {"attribute_id": "id_max", "attribute_name": "Continuous Drain Current (Id Max)",
         "logic_type": "threshold", "threshold_direction": "gte", "weight": 10, "sort_order": 8,
         "engineering_reason": "Must carry at least the original continuous current."},
        {"attribute_id": "id_pulse", "attribute_name": "Peak Pulsed Drain Current (Id Pulse)",
         "logic_type": "threshold", "threshold_direction": "gte", "weight": 7, "sort_order": 9,
         "engineering_reason": "Must survive inrush and fault pulses."},
        {"attribute_id": "pd", "attribute_name": "Power Dissipation (Pd Max)",
         "logic_type": "threshold", "threshold_direction": "gte", "weight": 6, "sort_order": 10,
         "engineering_reason": "Higher dissipation rating is acceptable."},
        {"attribute_id": "avalanche_energy", "attribute_name": "Avalanche Energy (Eas)",
         "logic_type": "threshold", "threshold_direction": "gte", "weight": 7, "sort_order": 11,
         "engineering_reason": "Inductive loads need at least the same avalanche rating."},

        # Conduction and switching
        {"attribute_id": "rds_on", "attribute_name": "On-State Resistance (Rds(on))",
         "logic_type": "threshold", "threshold_direction": "lte", "weight": 9, "sort_order": 12,
         "engineering_reason": "Lower Rds(on) means lower conduction loss."},
        {"attribute_id": "vgs_th", "attribute_name": "Gate Threshold Voltage (Vgs(th))",
         "logic_type": "application_review", "weight": 6, "sort_order": 13,
         "engineering_reason": "Must be fully enhanced by the available drive voltage."},
        {"attribute_id": "qg", "attribute_name": "Total Gate Charge (Qg)",
         "logic_type": "threshold", "threshold_direction": "lte", "weight": 8, "sort_order": 14,
         "engineering_reason": "Lower gate charge eases the driver and cuts switching loss."},
        {"attribute_id": "qgd", "attribute_name": "Gate-Drain Charge / Miller Charge (Qgd)",
         "logic_type": "threshold", "threshold_direction": "lte", "weight": 7, "sort_order": 15,
         "engineering_reason": "Miller charge dominates hard-switching loss."},
        {"attribute_id": "qgs", "attribute_name": "Gate-Source Charge (Qgs)",
         "logic_type": "threshold", "threshold_direction": "lte", "weight": 6, "sort_order": 16,
         "engineering_reason": "Lower is better for switching speed."},
        {"attribute_id": "ciss", "attribute_name": "Input Capacitance (Ciss)",
         "logic_type": "threshold", "threshold_direction": "lte", "weight": 6, "sort_order": 17,
         "engineering_reason": "Lower input capacitance loads the driver less."},
        {"attribute_id": "coss", "attribute_name": "Output Capacitance (Coss)",
         "logic_type": "application_review", "weight": 7, "sort_order": 18,
         "engineering_reason": "Coss can be part of a resonant tank. Lower is not always better."},
        {"attribute_id": "crss", "attribute_name": "Reverse Transfer Capacitance (Crss)",
         "logic_type": "threshold", "threshold_direction": "lte", "weight": 7, "sort_order": 19,
         "engineering_reason": "Lower Crss reduces dV/dt coupling into the gate."},

        # Body diode and thermal
        {"attribute_id": "body_diode_vf", "attribute_name": "Body Diode Forward Voltage (Vf)",
         "logic_type": "threshold", "threshold_direction": "lte", "weight": 6, "sort_order": 20,
         "engineering_reason": "Sets dead-time conduction loss."},
        {"attribute_id": "body_diode_trr", "attribute_name": "Body Diode Reverse Recovery Time (trr)",
         "logic_type": "threshold", "threshold_direction": "lte", "weight": 8, "sort_order": 21,
         "engineering_reason": "Slow recovery causes shoot-through current in bridges."},
        {"attribute_id": "rth_jc", "attribute_name": "Thermal Resistance Junction-to-Case (Rθjc)",
         "logic_type": "threshold", "threshold_direction": "lte", "weight": 7, "sort_order": 22,
         "engineering_reason": "Lower is better for heat transfer."},
        {"attribute_id": "rth_ja", "attribute_name": "Thermal Resistance Junction-to-Ambient (Rθja)",
         "logic_type": "application_review", "weight": 5, "sort_order": 23,
         "engineering_reason": "Depends on board copper. Compare with the actual layout."},
        {"attribute_id": "soa", "attribute_name": "Safe Operating Area (SOA) Curves",
         "logic_type": "application_review", "weight": 7, "sort_order": 24,
         "engineering_reason": "SOA curves must be compared for linear-mode operation."},
        {"attribute_id": "height", "attribute_name": "Height / Profile",
         "logic_type": "fit", "weight": 5, "sort_order": 25,
         "engineering_reason": "Must not exceed the original height."},
        {"attribute_id": "mounting_style", "attribute_name": "Mounting Style",
         "logic_type": "identity", "weight": 9, "sort_order": 26,
         "engineering_reason": "SMD and through-hole are not interchangeable."},
        {"attribute_id": "packaging", "attribute_name": "Packaging Format (Tape/Reel, Tube, Tray)",
         "logic_type": "operational", "weight": 2, "sort_order": 27,
         "engineering_reason": "Packaging must suit the assembly line."},
    ],
}

MOSFETS_CONTEXT = {
    "family_ids": ["B5"],
    "context_sensitivity": "high",
    "questions": [
        {
            "question_id": "switching_topology",
            "question_text": "What switching topology does this MOSFET operate in?",
            "priority": 1,
            "options": [
                {
                    "value": "hard_switching",
                    "label": "Hard-switching PWM (buck, boost, half-bridge)",
                    "attribute_effects": [
                        {"attribute_id": "qgd", "effect": "escalate_to_primary",
                         "note": "Miller charge drives switching loss: Psw ~ Qgd x Vds x fsw"},
                        {"attribute_id": "crss", "effect": "escalate_to_primary",
                         "note": "Crss couples drain dV/dt into the gate"},
                    ],
                },
                {
                    "value": "soft_switching",
                    "label": "Soft-switching / resonant (ZVS, LLC, CRM)",
                    "attribute_effects": [
                        {"attribute_id": "coss", "effect": "escalate_to_mandatory",
                         "note": "Coss is part of the resonant tank; a different value shifts the resonance"},
                    ],
                },
                {
                    "value": "linear_mode",
                    "label": "Linear mode (hot-swap, eFuse, motor soft-start)",
                    "attribute_effects": [
                        {"attribute_id": "soa", "effect": "escalate_to_mandatory",
                         "note": "The device runs on the SOA boundary in linear mode"},
                        {"attribute_id": "vgs_th", "effect": "escalate_to_primary",
                         "note": "Vgs(th) sets the partial-conduction operating point"},
                    ],
                },
                {
                    "value": "dc_low_frequency",
                    "label": "DC / low-frequency (load switch, ORing, battery protection)",
                    "attribute_effects": [
                        {"attribute_id": "rds_on", "effect": "escalate_to_mandatory",
                         "note": "Conduction loss dominates at DC"},
                        {"attribute_id": "qg", "effect": "not_applicable",
                         "note": "Switching loss is negligible at DC"},
                        {"attribute_id": "qgd", "effect": "not_applicable",
                         "note": "Switching loss is negligible at DC"},
                        {"attribute_id": "qgs", "effect": "not_applicable",
                         "note": "Switching loss is negligible at DC"},
                    ],
                },
            ],
        },
        {
            "question_id": "synchronous_rectification",
            "question_text": "Is this MOSFET used in synchronous rectification?",
            "priority": 2,
            "options": [
                {
                    "value": "yes_above_50khz",
                    "label": "Yes, at 50kHz or more",
                    "attribute_effects": [
                        {"attribute_id": "body_diode_trr", "effect": "escalate_to_mandatory",
                         "block_on_missing": True,
                         "note": "High trr causes shoot-through at this frequency"},
                        {"attribute_id": "body_diode_vf", "effect": "escalate_to_primary",
                         "note": "Body diode Vf sets dead-time loss"},
                    ],
                },
                {
                    "value": "yes_below_50khz",
                    "label": "Yes, below 50kHz",
                    "attribute_effects": [
                        {"attribute_id": "body_diode_trr", "effect": "escalate_to_primary",
                         "note": "trr matters but is not blocking at low frequency"},
                        {"attribute_id": "body_diode_vf", "effect": "escalate_to_primary",
                         "note": "Body diode Vf sets dead-time loss"},
                    ],
                },
                {"value": "no", "label": "No"},
            ],
        },
        {
            "question_id": "parallel_operation",
            "question_text": "Are MOSFETs operated in parallel for current sharing?",
            "priority": 3,
            "options": [
                {
                    "value": "yes",
                    "label": "Yes, parallel MOSFETs",
                    "attribute_effects": [
                        {"attribute_id": "vgs_th", "effect": "escalate_to_primary",
                         "note": "Vgs(th) spread causes uneven current sharing"},
                    ],
                },
                {"value": "no", "label": "No"},
            ],
        },
        {
            "question_id": "automotive",
            "question_text": "Is this an automotive application?",
            "priority": 5,
            "options": [
                {
                    "value": "yes",
                    "label": "Yes, automotive",
                    "attribute_effects": [
                        {"attribute_id": "aec_q101", "effect": "escalate_to_mandatory",
                         "note": "Automotive application requires AEC-Q101"},
                        {"attribute_id": "avalanche_energy", "effect": "escalate_to_primary",
                         "note": "Inductive load dumps need avalanche capability"},
                    ],
                },
                {"value": "no", "label": "No"},
            ],
        },
    ],
}

SUBCATEGORY_PATTERNS: list[tuple[str, str]] = [
    ("MOSFET", "B5"),
    ("MOSFETs", "B5"),
    ("N-Channel MOSFET", "B5"),
    ("P-Channel MOSFET", "B5"),
    ("Transistors - FETs, MOSFETs - Single", "B5"),
]
