from tabulate import tabulate

from fairdice.dice import Die


class ProbabilityCalculator:
    @staticmethod
    def calculate_win_probability(die1: Die, die2: Die) -> float:
        """Share of face pairs where die1 shows strictly more than die2."""
        wins = sum(1 for f1 in die1.faces for f2 in die2.faces if f1 > f2)
        total_outcomes = die1.sides() * die2.sides()
        return wins / total_outcomes


class HelpTableGenerator:
    RULES = (
        "1. At the start, guess my 0 or 1 to decide who picks a die first.",
        "2. You cannot choose the same die as your opponent.",
        "3. For every throw, add your number to mine modulo the number of faces.",
        "4. After each step I reveal my number and key so you can check my HMAC.",
        "5. At any prompt, type 'X' to exit or '?' to see this help again.",
    )

    @staticmethod
    def rules_text() -> str:
        return "\n--- Rules ---\n" + "\n".join(HelpTableGenerator.RULES)

    @staticmethod
    def generate_table(all_dice: list[Die],
                       calculator: type[ProbabilityCalculator] = ProbabilityCalculator) -> str:
        headers = ["User v PC >"] + [str(d) for d in all_dice]
        table_data = []
        for user_die in all_dice:
            row = [str(user_die)]
            for pc_die in all_dice:
                if user_die is pc_die:
                    row.append("-")
                else:
                    prob = calculator.calculate_win_probability(user_die, pc_die)
                    row.append(f"{prob:.4f}")
            table_data.append(row)

        intro = (
            "\n--- Win Probability Table ---\n"
            "Probability of the User's die (rows) winning against the PC's die (columns).\n"
        )
        return intro + tabulate(table_data, headers=headers, tablefmt="grid", disable_numparse=True)
