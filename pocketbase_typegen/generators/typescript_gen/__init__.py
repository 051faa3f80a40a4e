from pocketbase_typegen.generators.typescript_gen.generator import generate

__all__ = ["generate"]
