#!/usr/bin/env python
"""
Score a clinical case file with every applicable calculator.

The case file is JSON with any of these sections:

    {
      "ohis": {"debris_scores": {"16": 1, ...}, "calculus_scores": {...}},
      "smoking": {"cigarettes_per_day": 10, "years_of_smoking": 12},
      "cairo": [{"tooth_number": 31, "has_interdental_loss": true, "extends_to_mgj": false}],
      "vmi": {"31": 0.5, "41": 1.0},
      "aap": {"max_cal": 4.5, "bone_loss_per_year": 0.8, "smoker": false},
      "psr": [0, 1, 2, 0, 3, 1],
      "dmft": {"decayed": [16], "missing": [36], "filled": [11]},
      "osmf": {"mouth_opening_mm": 28},
      "cephalometric": {"S": {"x": 0, "y": 0}, ...},
      "profile": {"nose_tip": {"x": 0, "y": 0}, ...},
      "ald": {"upper_arch_available": 70, "lower_arch_available": 60,
              "upper_overrides": {"11": 9.0}, "lower_overrides": {}},
      "war": {"winter_class": "MESIOANGULAR", "arch_class": "CLASS_II", "radio_depth": "POSITION_B"},
      "diagnosis": {"symptoms": [...], "clinical_findings": [...], "vital_signs": [...]}
    }
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from dental_scope import (
    CephalometricLandmarks,
    InvalidInputError,
    ProfileLandmarks,
    analyze_profile,
    calculate_ald,
    calculate_all_angles,
    calculate_dmft,
    calculate_ohis,
    calculate_smoking_index,
    calculate_vmi,
    calculate_war_score,
    classify_cairo_recession,
    classify_periodontitis,
    default_arch,
    get_cairo_recession_details,
    interpret_psr,
    rank_diagnoses,
    stage_osmf,
)

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def _int_keys(mapping: dict) -> dict:
    return {int(k): v for k, v in mapping.items()}


def score_case(case: dict) -> dict:
    """Run each calculator whose section is present in the case."""
    results = {}

    if "ohis" in case:
        section = case["ohis"]
        results["ohis"] = calculate_ohis(
            _int_keys(section.get("debris_scores", {})),
            _int_keys(section.get("calculus_scores", {})),
        ).to_dict()

    if "smoking" in case:
        section = case["smoking"]
        results["smoking"] = calculate_smoking_index(
            section["cigarettes_per_day"], section["years_of_smoking"],
        ).to_dict()

    if "cairo" in case:
        results["cairo"] = [
            get_cairo_recession_details(
                site["tooth_number"],
                classify_cairo_recession(site["has_interdental_loss"], site.get("extends_to_mgj", False)),
            ).to_dict()
            for site in case["cairo"]
        ]

    if "vmi" in case:
        results["vmi"] = calculate_vmi(_int_keys(case["vmi"])).to_dict()

    if "aap" in case:
        section = case["aap"]
        results["aap"] = classify_periodontitis(
            section["max_cal"],
            bone_loss_percent=section.get("bone_loss_percent"),
            bone_loss_per_year=section.get("bone_loss_per_year"),
            diabetes=section.get("diabetes", False),
            smoker=section.get("smoker", False),
        ).to_dict()

    if "psr" in case:
        results["psr"] = interpret_psr(case["psr"]).to_dict()

    if "dmft" in case:
        section = case["dmft"]
        results["dmft"] = calculate_dmft(
            section.get("decayed", []), section.get("missing", []), section.get("filled", []),
        ).to_dict()

    if "osmf" in case:
        results["osmf"] = stage_osmf(case["osmf"]["mouth_opening_mm"]).to_dict()

    if "cephalometric" in case:
        try:
            landmarks = CephalometricLandmarks.from_mapping(case["cephalometric"])
            results["cephalometric"] = calculate_all_angles(landmarks).to_dict()
        except InvalidInputError as e:
            logger.warning("Skipping cephalometric analysis: %s", e)

    if "profile" in case:
        try:
            landmarks = ProfileLandmarks.from_mapping(case["profile"])
            results["profile"] = analyze_profile(landmarks).to_dict()
        except InvalidInputError as e:
            logger.warning("Skipping profile analysis: %s", e)

    if "ald" in case:
        section = case["ald"]
        results["ald"] = calculate_ald(
            default_arch("upper", _int_keys(section.get("upper_overrides", {}))),
            default_arch("lower", _int_keys(section.get("lower_overrides", {}))),
            section["upper_arch_available"],
            section["lower_arch_available"],
        ).to_dict()

    if "war" in case:
        section = case["war"]
        results["war"] = calculate_war_score(
            section["winter_class"],
            section["arch_class"],
            section["radio_depth"],
            tooth_number=section.get("tooth_number"),
        ).to_dict()

    if "diagnosis" in case:
        section = case["diagnosis"]
        results["diagnosis"] = [
            c.to_dict() for c in rank_diagnoses(
                section.get("symptoms", []),
                section.get("clinical_findings", []),
                section.get("vital_signs"),
            )
        ]

    return results


def main():
    parser = argparse.ArgumentParser(description="Score a dental clinical case file")
    parser.add_argument("--case", "-c", type=str, required=True, help="Path to case JSON")
    parser.add_argument("--output", "-o", type=str, default=None, help="Write results JSON here")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation")

    args = parser.parse_args()

    case = json.loads(Path(args.case).read_text())
    try:
        results = score_case(case)
    except InvalidInputError as e:
        logger.error("Invalid case file: %s", e)
        sys.exit(2)

    output = json.dumps(results, indent=args.indent)
    if args.output:
        Path(args.output).write_text(output)
        print(f"Scored {len(results)} sections -> {args.output}")
    else:
        print(output)


if __name__ == "__main__":
    main()
