from quill.evaluation.evaluator import evaluate, expand
