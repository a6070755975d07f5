from translator.environment import Environment
from translator.evaluation.evaluator import Evaluator
from translator.generation.code import Code
from translator.generation.generator import Generator
from translator.parser.parser import Parser
from translator.scanner.scanner import Scanner
from translator.token import Token
from translator.translator import Translator
from translator.type import Type
