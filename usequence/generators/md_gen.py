class MarkdownReportGenerator:
    def __init__(self, terms, title="Plan Studija"):
        self.terms = terms
        self.title = title

    def generate(self):
        total = sum(len(t.courses) for t in self.terms)
        report = f"# {self.title}\n\n"
        report += f"Ukupno: {total} kurseva u {len(self.terms)} termina\n\n"

        for term in self.terms:
            report += f"## {term.season} {term.year}\n"
            if not term.courses:
                report += "- _Nema kurseva u ovom terminu_\n\n"
                continue
            for course in term.courses:
                report += f"- **{course.subject_code} {course.catalog_code}**"
                if course.name:
                    report += f" - {course.name}"
                report += "\n"
                if course.prerequisites is not None:
                    report += f"  - Preduslovi: `{course.prerequisites}`\n"
            report += "\n"
        return report
