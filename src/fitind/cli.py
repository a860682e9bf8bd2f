"""
Command-line front end for the nutrition planner.

Usage:
    fitind plan [--weight 72 --goal deficit ...] [--goal-weight 65]
    fitind quick --weight 70 --age 25 --bmi 22 --diet veg
    fitind profile
    fitind alternatives "Lunch - Roti, Dal, Rice & Sabzi"
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace

from fitind.app_logging import configure_logging
from fitind.containers import AppContainer, build_container
from fitind.domain.nutrition import Meal, PlanResult
from fitind.domain.profile import (
    ActivityLevel,
    BodyType,
    DietType,
    Gender,
    Goal,
    MacroDistribution,
    Profile,
    TrainingLevel,
    Weekday,
    completion_progress,
    default_profile,
)
from fitind.services.meals import get_meal_alternatives

# argparse dest -> (Profile field, converter)
_PROFILE_OPTIONS = {
    "name": ("name", str),
    "age": ("age", int),
    "gender": ("gender", Gender),
    "weight": ("weight", float),
    "height": ("height", float),
    "activity": ("activity_level", ActivityLevel),
    "goal": ("goal", Goal),
    "diet": ("diet_type", DietType),
    "training": ("training_level", TrainingLevel),
    "body_type": ("body_type", BodyType),
    "body_fat": ("body_fat_percentage", float),
    "macros": ("macro_distribution", MacroDistribution),
}


def _choices(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


def profile_from_args(args: argparse.Namespace, base: Profile) -> Profile:
    """Overlay command-line options on a base profile."""
    changes: dict[str, object] = {}
    for dest, (field_name, convert) in _PROFILE_OPTIONS.items():
        value = getattr(args, dest, None)
        if value is not None:
            changes[field_name] = convert(value)
    if args.non_veg_days is not None:
        changes["non_veg_days"] = tuple(
            dict.fromkeys(Weekday(day) for day in args.non_veg_days)
        )
    return replace(base, **changes)


def _format_meal(meal: Meal) -> str:
    return (
        f"  {meal.name}\n"
        f"    {meal.localized_name} | {meal.portion}\n"
        f"    {meal.calories} kcal | P {meal.protein}g | C {meal.carbs}g | F {meal.fats}g"
    )


def render_plan(plan: PlanResult) -> str:
    """Render a plan as plain text."""
    lines = [
        "FitInd Nutrition Plan",
        "-" * 50,
        f"BMR: {plan.bmr:.0f} kcal",
        f"TDEE: {plan.tdee:.0f} kcal",
        f"Target: {plan.target_calories:.0f} kcal",
        (
            f"Macros: protein {plan.macros.protein}g, carbs {plan.macros.carbs}g, "
            f"fats {plan.macros.fats}g"
        ),
        f"BMI: {plan.bmi:.1f} ({plan.health_status.status})",
        f"Water: {plan.water_intake} L/day",
    ]
    if plan.bmr_katch is not None:
        lines.append(f"BMR (Katch-McArdle): {plan.bmr_katch:.0f} kcal")

    if plan.goal_timeline is not None:
        timeline = plan.goal_timeline
        lines += [
            "",
            "Goal timeline:",
            f"  {timeline.weeks_to_goal} weeks, around {timeline.target_date}",
            f"  {timeline.weekly_weight_change} kg/week",
            f"  {timeline.recommendation}",
        ]

    if plan.weekly_plan is not None:
        lines += ["", plan.weekly_plan.note, "", "Non-veg days:"]
        lines += [_format_meal(meal) for meal in plan.weekly_plan.non_veg_meals]
        lines += ["", "Veg days:"]
        lines += [_format_meal(meal) for meal in plan.weekly_plan.veg_meals]
    else:
        lines += ["", "Meals:"]
        lines += [_format_meal(meal) for meal in plan.meal_plan]

    lines += ["", "Supplements:"]
    lines += [
        f"  [{item.priority.value}] {item.name}: {item.purpose} ({item.timing})"
        for item in plan.supplements
    ]

    timing = plan.meal_timing
    lines += [
        "",
        "Meal timing:",
        f"  {timing.preworkout}",
        f"  {timing.postworkout}",
        f"  {timing.daily_meals}",
        f"  {timing.protein_distribution}",
    ]
    return "\n".join(lines)


def cmd_plan(args: argparse.Namespace, container: AppContainer) -> int:
    """Build and print a full plan."""
    base = container.profile_service.load() or default_profile()
    profile = profile_from_args(args, base)
    goal_weight = (
        args.goal_weight
        if args.goal_weight is not None
        else container.settings.default_goal_weight
    )
    plan = container.plan_service.build_plan(profile, goal_weight=goal_weight)
    print(render_plan(plan))
    if not args.no_save:
        container.profile_service.save(profile)
    return 0


def cmd_quick(args: argparse.Namespace, container: AppContainer) -> int:
    """Build and print a quick plan."""
    plan = container.plan_service.quick_plan(
        weight=args.weight, age=args.age, bmi=args.bmi, diet_type=DietType(args.diet)
    )
    print(render_plan(plan))
    return 0


def cmd_profile(args: argparse.Namespace, container: AppContainer) -> int:
    """Show the saved profile."""
    profile = container.profile_service.load()
    if profile is None:
        print("No saved profile.")
        return 0
    print(f"Name: {profile.name or '-'}")
    print(f"Age: {profile.age}")
    print(f"Gender: {profile.gender.value}")
    print(f"Weight: {profile.weight} kg")
    print(f"Height: {profile.height} cm")
    print(f"Activity: {profile.activity_level.value}")
    print(f"Goal: {profile.goal.value}")
    print(f"Diet: {profile.diet_type.value}")
    if profile.non_veg_days:
        print(f"Non-veg days: {', '.join(day.value for day in profile.non_veg_days)}")
    print(f"Completed: {completion_progress(profile):.1f}%")
    return 0


def cmd_alternatives(args: argparse.Namespace, container: AppContainer) -> int:
    """Print swap suggestions for a meal."""
    for option in get_meal_alternatives(" ".join(args.meal)):
        print(f"- {option}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fitind",
        description="FitInd personalized nutrition planner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # plan command
    plan_parser = subparsers.add_parser("plan", help="Build a full plan")
    plan_parser.add_argument("--name")
    plan_parser.add_argument("--age", type=int)
    plan_parser.add_argument("--gender", choices=_choices(Gender))
    plan_parser.add_argument("--weight", type=float, help="Weight in kg")
    plan_parser.add_argument("--height", type=float, help="Height in cm")
    plan_parser.add_argument("--activity", choices=_choices(ActivityLevel))
    plan_parser.add_argument("--goal", choices=_choices(Goal))
    plan_parser.add_argument("--diet", choices=_choices(DietType))
    plan_parser.add_argument("--training", choices=_choices(TrainingLevel))
    plan_parser.add_argument("--body-type", choices=_choices(BodyType))
    plan_parser.add_argument("--body-fat", type=float, help="Body fat percentage")
    plan_parser.add_argument("--macros", choices=_choices(MacroDistribution))
    plan_parser.add_argument(
        "--non-veg-days",
        nargs="*",
        choices=_choices(Weekday),
        help="Weekdays for non-veg meals (flexitarian)",
    )
    plan_parser.add_argument("--goal-weight", type=float, help="Target weight in kg")
    plan_parser.add_argument(
        "--no-save",
        action="store_true",
        help="Don't save the profile after planning",
    )

    # quick command
    quick_parser = subparsers.add_parser("quick", help="Build a quick plan")
    quick_parser.add_argument("--weight", type=float, required=True)
    quick_parser.add_argument("--age", type=int, required=True)
    quick_parser.add_argument("--bmi", type=float, required=True)
    quick_parser.add_argument("--diet", choices=["veg", "nonveg"], default="veg")

    # profile command
    subparsers.add_parser("profile", help="Show the saved profile")

    # alternatives command
    alternatives_parser = subparsers.add_parser(
        "alternatives", help="Suggest meal swaps"
    )
    alternatives_parser.add_argument("meal", nargs="+", help="Meal name")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    container = build_container()
    configure_logging(container.settings.debug)

    commands = {
        "plan": cmd_plan,
        "quick": cmd_quick,
        "profile": cmd_profile,
        "alternatives": cmd_alternatives,
    }
    try:
        return commands[args.command](args, container)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
