"""Demo: announce a dog through a reference declared as a plain `Animal`."""
try:
    # Prefer absolute import when run as a module
    from menagerie.entity import Animal, Dog
except ImportError:
    # Fallback for running in environments where absolute imports fail
    from .entity import Animal, Dog


def main():
    my_animal: Animal = Animal()  # never announced
    my_dog: Animal = Dog()
    my_dog.announce()


if __name__ == "__main__":
    main()
