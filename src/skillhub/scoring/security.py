"""
Security pattern scanning for skill instructions.

Instructions are executed by an agent with shell access, so a handful of
well-known malicious shapes are flagged before publishing.
"""

import re
from typing import List, Optional

from skillhub.taxonomy import CheckSeverity, ValidationCheck


class SecurityRule:
    """A named regex rule over instruction text."""

    def __init__(self, key: str, pattern: str, label: str, message: str, severity: CheckSeverity):
        self.key = key
        self.pattern = re.compile(pattern, re.IGNORECASE)
        self.label = label
        self.message = message
        self.severity = severity

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


SECURITY_RULES = [
    SecurityRule(
        "shell_injection",
        r"(?:curl|wget|fetch)\s+[^\n]*\|\s*(?:bash|sh|zsh|exec)|rm\s+-rf\s+[/~]|mkfs\s|dd\s+if=|>\s*/dev/sd",
        "Destructive shell commands",
        "Instructions contain destructive shell patterns (pipe to shell, rm -rf /, disk overwrite)",
        CheckSeverity.ERROR,
    ),
    SecurityRule(
        "data_exfiltration",
        r"(?:curl|wget|fetch|nc|ncat)\s+(?:--data|--upload|-d|-F|-T)\s*[^\s]*"
        r"(?:\$\{?\w*(?:KEY|SECRET|TOKEN|PASSWORD|CREDENTIAL|API_KEY)\w*\}?|/etc/(?:passwd|shadow)|~/\.(?:ssh|aws|env))",
        "Data exfiltration",
        "Instructions appear to exfiltrate sensitive data (secrets, credentials, private files) to external services",
        CheckSeverity.ERROR,
    ),
    SecurityRule(
        "env_dumping",
        r"(?:env|printenv|set)\s*(?:\||>).*(?:curl|wget|nc|tee\s+/dev/tcp)",
        "Environment variable exfiltration",
        "Instructions dump environment variables to external destinations",
        CheckSeverity.ERROR,
    ),
    SecurityRule(
        "suspicious_urls",
        r"(?:curl|wget|fetch|nc)\s+(?:-X\s*POST\s+)?https?://(?:\d{1,3}\.){3}\d{1,3}"
        r"|(?:curl|wget)\s+.*(?:pastebin|ngrok|requestbin|webhook\.site|pipedream|hookbin|burpcollaborator)",
        "Suspicious external URLs",
        "Instructions send data to IP addresses or known data collection services",
        CheckSeverity.ERROR,
    ),
    SecurityRule(
        "prompt_injection",
        r"ignore\s+(?:all\s+)?previous\s+instructions|you\s+are\s+now\s+(?:a\s+)?(?:different|new)"
        r"|override\s+(?:your|all)\s+(?:safety|system)\s+(?:rules|instructions|prompt)"
        r"|disregard\s+(?:all|your)\s+(?:previous|prior|safety)|jailbreak|DAN\s*mode",
        "Prompt injection",
        "Instructions contain prompt injection attempts that try to override safety rules",
        CheckSeverity.ERROR,
    ),
    SecurityRule(
        "obfuscated_commands",
        r"(?:echo|printf)\s+\S+\s*\|\s*(?:base64\s+-d|openssl\s+(?:enc|base64))\s*\|\s*(?:bash|sh|eval)"
        r"|eval\s*\(\s*(?:atob|Buffer\.from|base64)",
        "Obfuscated commands",
        "Instructions contain base64-encoded commands piped to shell execution",
        CheckSeverity.ERROR,
    ),
    SecurityRule(
        "crypto_mining",
        r"xmrig|minerd|cpuminer|cryptonight|stratum\+tcp|pool\.\w+\.(?:com|net|org):\d+|--algo\s+(?:cn|rx|randomx)",
        "Cryptocurrency mining",
        "Instructions reference cryptocurrency mining tools or pools",
        CheckSeverity.ERROR,
    ),
    SecurityRule(
        "reverse_shell",
        r"/dev/tcp/|nc\s+-(?:e|lvp)|bash\s+-i\s+>&|python[23]?\s+-c\s+['\"]import\s+(?:socket|os)"
        r"|php\s+-r\s+.*fsockopen|perl\s+-e\s+.*socket",
        "Reverse shell",
        "Instructions contain reverse shell patterns that could give remote access",
        CheckSeverity.ERROR,
    ),
    SecurityRule(
        "disable_security",
        r"--no-verify|--no-check|git\s+config\s+.*(?:false|off)|chmod\s+777\s|chown\s+root"
        r"|sudo\s+(?:chmod|chown|rm|bash|sh|su)",
        "Security bypass",
        "Instructions disable security features or escalate privileges",
        CheckSeverity.WARNING,
    ),
    SecurityRule(
        "suspicious_file_access",
        r"(?:cat|less|head|tail|cp|mv|tar)\s+(?:/etc/(?:passwd|shadow|sudoers)|~/\.(?:ssh/|gnupg/|aws/|env)|/root/|/var/log/)",
        "Sensitive file access",
        "Instructions access sensitive system files (passwords, SSH keys, credentials)",
        CheckSeverity.WARNING,
    ),
]


def run_security_checks(instructions: str, rules: Optional[List[SecurityRule]] = None) -> List[ValidationCheck]:
    """Run every security rule against the instructions, one check per rule."""
    checks = []
    for rule in SECURITY_RULES if rules is None else rules:
        matched = rule.matches(instructions)
        checks.append(ValidationCheck(
            id=f"security.{rule.key}",
            label=rule.label,
            passed=not matched,
            severity=rule.severity,
            message=rule.message if matched else f"No {rule.label.lower()} detected",
        ))
    return checks
