"""
Canned model outputs and a fake model client for footprint tests.
"""

import copy
import threading

SAMPLE_FOOTPRINT = {
    "totalKgCO2eAnnual": 42000,
    "dataSource": "Estimated from industry benchmarks",
    "breakdown": [
        {"category": "Electricity", "kgCO2e": 18000, "percent": 42.86, "status": "estimated"},
        {"category": "Commutes", "kgCO2e": 14000, "percent": 33.33, "status": "estimated"},
        {"category": "Business Travel", "kgCO2e": 6000, "percent": 14.29, "status": "estimated"},
        {"category": "Waste", "kgCO2e": 4000, "percent": 9.52, "status": "estimated"},
    ],
    "calculationNotes": "No utility bills provided.",
    "recommendations": ["Switch to a green electricity tariff"],
}


def _actions(prefix, count, impact="Medium", cost="$"):
    return [
        {
            "title": f"{prefix} action {i}",
            "description": f"Do the {prefix.lower()} thing number {i}.",
            "impact": impact,
            "cost": cost,
        }
        for i in range(1, count + 1)
    ]


SUB_REQUEST_RESULTS = {
    "summary": {"executiveSummary": "Your footprint is 42 tonnes; electricity is the largest share."},
    "priority": {
        "title": "Switch to a renewable electricity plan",
        "description": "Electricity is 43% of your emissions.",
        "impact": "High",
        "cost": "$",
        "paybackPeriod": "Immediate",
    },
    "quick_wins": {
        "quickWins": [
            {"title": "Turn off idle equipment", "description": "Shut down computers overnight."},
            {"title": "Set thermostat schedules", "description": "Lower heating out of hours."},
            {"title": "Start a recycling program", "description": "Separate paper and plastics."},
        ]
    },
    "energy": {"actions": _actions("Energy", 4)},
    "transport": {"actions": _actions("Transport", 3)},
    "other": {"actions": _actions("Supply", 3)},
}


class FakeModelClient:
    """
    Stands in for GenerativeModelClient. Returns canned data keyed by the
    request name; `failures` maps names to exceptions to raise instead and
    `blockers` maps names to events the call waits on before answering.
    """

    def __init__(self, results=None, footprint=None, failures=None, blockers=None, reply="Try LED lighting 🌱"):
        self.results = copy.deepcopy(results if results is not None else SUB_REQUEST_RESULTS)
        self.footprint = copy.deepcopy(footprint if footprint is not None else SAMPLE_FOOTPRINT)
        self.failures = failures or {}
        self.blockers = blockers or {}
        self.reply = reply
        self.calls = []
        self.text_calls = []
        self._lock = threading.Lock()

    def generate_object(self, system, prompt, schema, name="response", temperature=0.2):
        with self._lock:
            self.calls.append({"system": system, "prompt": prompt, "name": name})
        if name in self.blockers:
            self.blockers[name].wait(timeout=10)
        if name in self.failures:
            raise self.failures[name]
        if name == "carbon_footprint":
            return copy.deepcopy(self.footprint)
        return copy.deepcopy(self.results[name])

    def generate_text(self, system, messages, temperature=0.7, max_tokens=500):
        self.text_calls.append({
            "system": system,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        })
        if "chat" in self.failures:
            raise self.failures["chat"]
        return self.reply

    def prompt_for(self, name):
        return next(call["prompt"] for call in self.calls if call["name"] == name)
