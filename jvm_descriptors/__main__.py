from jvm_descriptors.cli import main

if __name__ == "__main__":
    main()
