from kmpsearch.entrypoint import main

if __name__ == "__main__":
    main(prog_name="kmpsearch")
