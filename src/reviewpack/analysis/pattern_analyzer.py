"""Line-by-line pattern analysis of chunk content."""

from reviewpack.analysis.rules import get_rule_set
from reviewpack.models import Finding


class PatternAnalyzer:
    """Applies a named rule set to every line of a chunk.

    Each rule is tested independently, so one line can yield several
    findings. The analyzer holds no state between calls.
    """

    def analyze(self, content: str, rule_set: str) -> list[Finding]:
        """Find rule matches in chunk content.

        Args:
            content: Chunk text, overlap included
            rule_set: Rule set name; unknown names use the default set

        Returns:
            Findings with chunk-local, 1-based line numbers, in line order
        """
        _, rules = get_rule_set(rule_set)
        findings = []
        for number, line in enumerate(content.split("\n"), start=1):
            for r in rules:
                if r.matches(line):
                    findings.append(
                        Finding(
                            line=number,
                            severity=r.severity,
                            message=r.message,
                            code=line.strip(),
                            rule=r.name,
                        )
                    )
        return findings
